from __future__ import annotations

from typing import Any, Dict, Iterable, Tuple

INTERACTIVE_TAGS = frozenset({"button", "input", "select", "textarea", "option", "summary"})
INTERACTIVE_ROLES = frozenset({"button", "link", "checkbox", "menuitem", "tab", "switch", "radio"})


def is_blank(value: Any) -> bool:
    return value is None or str(value).strip() == ""


def is_trueish(value: Any) -> bool:
    if value is True:
        return True
    if value is None or value is False:
        return False
    return str(value).strip().lower() in {"1", "true", "yes", "on"}


def is_interactive(tag_name: str, props: Dict[str, Any]) -> bool:
    if tag_name in INTERACTIVE_TAGS:
        return True
    if tag_name == "a" and not is_blank(props.get("href")):
        return True
    return False


def is_focusable(tag_name: str, props: Dict[str, Any]) -> bool:
    tab_index = as_int(props.get("tab_index"))
    if tab_index is not None:
        return tab_index >= 0
    return is_interactive(tag_name, props)


def as_int(value: Any) -> int | None:
    try:
        return None if value is None else int(value)
    except (TypeError, ValueError):
        return None


def static_text(children: Iterable[Any]) -> Tuple[str, bool]:
    """Collect the text a screen-reader would announce for `children`.

    Returns (text, unresolved); `unresolved` is True when a child is a
    component reference whose output is only known once it renders.
    """
    parts: list[str] = []
    unresolved = False
    for child in children:
        if child is None or child is False or child is True:
            continue
        if isinstance(child, (list, tuple)):
            text, pending = static_text(child)
            parts.append(text)
            unresolved = unresolved or pending
            continue
        tag = getattr(child, "tag", None)
        if tag is None:
            parts.append(str(child))
            continue
        if not isinstance(tag, str):
            unresolved = True
            continue
        props = getattr(child, "props", None) or {}
        if is_trueish(props.get("aria_hidden")):
            continue
        if tag == "img":
            parts.append(str(props.get("alt") or ""))
            continue
        text, pending = static_text(getattr(child, "children", ()) or ())
        parts.append(text)
        unresolved = unresolved or pending
    return "".join(parts), unresolved


def has_label_prop(props: Dict[str, Any]) -> bool:
    return any(not is_blank(props.get(name)) for name in ("aria_label", "aria_labelledby", "title"))
