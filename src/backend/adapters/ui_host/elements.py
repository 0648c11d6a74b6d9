from __future__ import annotations

from dataclasses import dataclass, field
from html import escape
from typing import Any, Dict, Iterable, Iterator, List, Optional


@dataclass
class Element:
    tag: Any
    props: Dict[str, Any] = field(default_factory=dict)
    children: List[Any] = field(default_factory=list)
    # Component instance whose render() created this element, if any.
    owner: Any = field(default=None, repr=False, compare=False)

    @property
    def id(self) -> Optional[str]:
        return self.props.get("id")

    def iter_elements(self) -> Iterator["Element"]:
        yield self
        for child in self.children:
            if isinstance(child, Element):
                yield from child.iter_elements()


def flatten_children(children: Iterable[Any]) -> List[Any]:
    flat: List[Any] = []
    for child in children:
        if child is None:
            continue
        if isinstance(child, (list, tuple)):
            flat.extend(flatten_children(child))
        else:
            flat.append(child)
    return flat


def text_content(node: Any) -> str:
    if node is None:
        return ""
    if isinstance(node, str):
        return node
    if isinstance(node, Element):
        return "".join(text_content(child) for child in node.children)
    if isinstance(node, (list, tuple)):
        return "".join(text_content(child) for child in node)
    return str(node)


def _normalize_attr_name(name: str) -> str:
    if name == "class_name":
        return "class"
    return name.replace("_", "-")


def _render_attrs(props: Dict[str, Any]) -> str:
    parts: List[str] = []
    for key, value in props.items():
        # Event handlers have no markup form.
        if value is None or value is False or callable(value):
            continue
        attr = _normalize_attr_name(key)
        if value is True:
            parts.append(attr)
        else:
            parts.append(f'{attr}="{escape(str(value), quote=True)}"')
    return (" " + " ".join(parts)) if parts else ""


def render_html(node: Any) -> str:
    if node is None:
        return ""
    if isinstance(node, (list, tuple)):
        return "".join(render_html(child) for child in node)
    if isinstance(node, Element):
        if not isinstance(node.tag, str):
            raise TypeError(f"Cannot render unexpanded component element {node.tag!r}; mount it first")
        attrs = _render_attrs(node.props)
        children_html = "".join(render_html(child) for child in node.children)
        return f"<{node.tag}{attrs}>{children_html}</{node.tag}>"
    return escape(str(node))
