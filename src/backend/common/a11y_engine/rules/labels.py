from __future__ import annotations

from typing import Any, Dict, Sequence

from ..host import has_hook
from ..registry import register_rule
from ..rule import RenderRule, ReportFn
from .support import INTERACTIVE_ROLES, has_label_prop, is_blank, is_interactive, static_text


@register_rule
class NO_LABEL(RenderRule):
    rule_key = "NO_LABEL"
    msg = (
        "You have an interactive element with no accessible label. Add text content, "
        "`aria_label` or `aria_labelledby` so screen-readers can announce it."
    )

    def test(
        self,
        tag_name: str,
        props: Dict[str, Any],
        children: Sequence[Any],
        report: ReportFn,
        host: Any = None,
    ) -> None:
        if not self._needs_label(tag_name, props) or has_label_prop(props):
            return
        if tag_name == "input" and str(props.get("type") or "").lower() == "hidden":
            return

        text, unresolved = static_text(children)
        if not is_blank(text):
            return
        if not unresolved:
            report()
            return
        # Part of the label comes from a component that has not rendered yet.
        self._check_after_render(host, props.get("id"), report)

    @staticmethod
    def _needs_label(tag_name: str, props: Dict[str, Any]) -> bool:
        if is_interactive(tag_name, props):
            return True
        role = str(props.get("role") or "").strip().lower()
        return role in INTERACTIVE_ROLES

    @staticmethod
    def _check_after_render(host: Any, element_id: Any, report: ReportFn) -> None:
        owner = getattr(host, "current_owner", None)
        if owner is None or element_id is None:
            return
        if not (has_hook(host, "after_render") and has_hook(host, "find_node")):
            return

        def check() -> None:
            node = host.find_node(element_id)
            if node is None:
                return
            text, _ = static_text(getattr(node, "children", ()) or ())
            if is_blank(text):
                report()

        host.after_render(owner, check)
