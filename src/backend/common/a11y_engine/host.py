"""Seams the engine expects from a host UI framework.

Only `create_element` is required. The remaining hooks are optional and the
engine degrades when they are missing: without `add_middleware` the entry
point is wrapped in place, without `after_render`/`find_node` diagnostics are
emitted without node correlation.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Protocol, runtime_checkable

CreateElement = Callable[..., Any]


@runtime_checkable
class ElementHost(Protocol):
    def create_element(self, element_type: Any, props: Optional[dict], *children: Any) -> Any:
        ...


def has_hook(host: Any, name: str) -> bool:
    return callable(getattr(host, name, None))


def owner_of(host: Any, element: Any) -> Any:
    if has_hook(host, "owner_of"):
        return host.owner_of(element)
    return getattr(element, "owner", None)


def display_name(component: Any) -> Optional[str]:
    name = getattr(component, "display_name", None)
    if callable(name):
        name = name()
    if name:
        return str(name)
    return None
