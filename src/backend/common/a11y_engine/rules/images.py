from __future__ import annotations

import re
from typing import Any, Dict, Sequence

from ..registry import register_rule
from ..rule import TagRule

_REDUNDANT_WORDS = re.compile(r"\b(image|picture|photo)\b", re.IGNORECASE)


@register_rule
class NO_ALT(TagRule):
    rule_key = "NO_ALT"
    tag_name = "img"
    msg = (
        "You forgot an `alt` prop on an image. Screen-readers announce the `src` of an image "
        'without alternative text; use `alt=""` for purely decorative images.'
    )

    def test(self, tag_name: str, props: Dict[str, Any], children: Sequence[Any]) -> bool:
        return props.get("alt") is not None


@register_rule
class REDUNDANT_ALT(TagRule):
    rule_key = "REDUNDANT_ALT"
    tag_name = "img"
    msg = (
        "Screen-readers already announce `img` elements as an image; you don't need the words "
        '"image", "photo" or "picture" in the alt prop.'
    )

    def test(self, tag_name: str, props: Dict[str, Any], children: Sequence[Any]) -> bool:
        alt = props.get("alt")
        if alt is None:
            return True
        return not _REDUNDANT_WORDS.search(str(alt))
