from __future__ import annotations

from typing import Any, Dict, Sequence

from ..registry import register_rule
from ..rule import PropRule
from .support import as_int, is_focusable, is_trueish


@register_rule
class HIDDEN_FOCUSABLE(PropRule):
    rule_key = "HIDDEN_FOCUSABLE"
    prop_name = "aria_hidden"
    msg = (
        'You have `aria-hidden="true"` on an element that can receive focus. '
        "Screen-reader users will land on it without hearing anything."
    )

    def test(self, tag_name: str, props: Dict[str, Any], children: Sequence[Any]) -> bool:
        if not is_trueish(props.get("aria_hidden")):
            return True
        return not is_focusable(tag_name, props)


@register_rule
class TABINDEX_GREATER_THAN_ZERO(PropRule):
    rule_key = "TABINDEX_GREATER_THAN_ZERO"
    prop_name = "tab_index"
    msg = "Avoid positive `tab_index` values; they override the natural focus order of the page."

    def test(self, tag_name: str, props: Dict[str, Any], children: Sequence[Any]) -> bool:
        value = as_int(props.get("tab_index"))
        return value is None or value <= 0
