from __future__ import annotations

from typing import Any, Dict, Sequence

from ..registry import register_rule
from ..rule import TagRule


@register_rule
class HASH_HREF_NEEDS_BUTTON(TagRule):
    rule_key = "HASH_HREF_NEEDS_BUTTON"
    tag_name = "a"
    msg = 'You have an anchor with `href="#"` and an `on_click` handler; use a button element instead.'

    def test(self, tag_name: str, props: Dict[str, Any], children: Sequence[Any]) -> bool:
        return not (props.get("href") == "#" and props.get("on_click") is not None)
