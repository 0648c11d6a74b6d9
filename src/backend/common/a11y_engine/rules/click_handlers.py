from __future__ import annotations

from typing import Any, Dict, Sequence

from ..registry import register_rule
from ..rule import PropRule
from .support import is_blank, is_interactive


@register_rule
class NO_ROLE(PropRule):
    rule_key = "NO_ROLE"
    prop_name = "on_click"
    msg = (
        "You have a click handler on a non-interactive element but no `role` prop. It will be "
        "unclear what this element is supposed to do to a screen-reader user."
    )

    def test(self, tag_name: str, props: Dict[str, Any], children: Sequence[Any]) -> bool:
        return is_interactive(tag_name, props) or not is_blank(props.get("role"))


@register_rule
class NO_TABINDEX(PropRule):
    rule_key = "NO_TABINDEX"
    prop_name = "on_click"
    msg = (
        "You have a click handler on a non-interactive element but no `tab_index` prop. "
        "Keyboard users will not be able to reach it."
    )

    def test(self, tag_name: str, props: Dict[str, Any], children: Sequence[Any]) -> bool:
        return is_interactive(tag_name, props) or props.get("tab_index") is not None


class _ButtonRoleKeyboard(PropRule):
    prop_name = "on_click"

    def test(self, tag_name: str, props: Dict[str, Any], children: Sequence[Any]) -> bool:
        if is_interactive(tag_name, props):
            return True
        if str(props.get("role") or "").strip().lower() != "button":
            return True
        return props.get("on_key_down") is not None


@register_rule
class BUTTON_ROLE_SPACE(_ButtonRoleKeyboard):
    rule_key = "BUTTON_ROLE_SPACE"
    msg = (
        'You have `role="button"` but did not define an `on_key_down` handler. '
        "Add it, and have the space key trigger the click handler."
    )


@register_rule
class BUTTON_ROLE_ENTER(_ButtonRoleKeyboard):
    rule_key = "BUTTON_ROLE_ENTER"
    msg = (
        'You have `role="button"` but did not define an `on_key_down` handler. '
        "Add it, and have the enter key trigger the click handler."
    )
