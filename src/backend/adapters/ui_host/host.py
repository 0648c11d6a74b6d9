from __future__ import annotations

from functools import partial
from typing import Any, Callable, Dict, List, Optional

from .elements import Element, flatten_children

Middleware = Callable[..., Any]


class Component:
    """Base class for host components.

    `render()` returns an element tree built with `self.el(...)`. Elements
    created while rendering record this instance as their owner.
    """

    name: Optional[str] = None

    def __init__(self, props: Optional[Dict[str, Any]] = None, *, host: Optional["UIHost"] = None):
        self.props: Dict[str, Any] = dict(props or {})
        self.host = host
        self.tree: Any = None
        self.mounted = False
        self.child_components: List["Component"] = []

    @property
    def display_name(self) -> str:
        return self.name or type(self).__name__

    def el(self, tag: Any, *children: Any, **props: Any) -> Element:
        return self.host.el(tag, *children, **props)

    def render(self) -> Any:  # pragma: no cover
        raise NotImplementedError


def _is_component_type(value: Any) -> bool:
    return isinstance(value, type) and issubclass(value, Component)


class UIHost:
    """Minimal declarative UI host: element construction, component lifecycle, node lookup."""

    def __init__(self):
        self._middleware: List[Middleware] = []
        self._create: Callable[..., Any] = self._construct
        self._owners: List[Component] = []
        self._pending: Dict[Component, List[Callable[[], None]]] = {}
        self._mounted: List[Component] = []

    # construction

    def add_middleware(self, middleware: Middleware) -> None:
        """Register `middleware(next_create, element_type, props, *children)`.

        Middleware registered later wraps the ones registered before it.
        """
        self._middleware.append(middleware)
        create: Callable[..., Any] = self._construct
        for mw in self._middleware:
            create = partial(mw, create)
        self._create = create

    def create_element(self, element_type: Any, props: Optional[Dict[str, Any]] = None, *children: Any) -> Any:
        return self._create(element_type, props, *children)

    def el(self, tag: Any, *children: Any, **props: Any) -> Element:
        return self.create_element(tag, props, *flatten_children(children))

    def _construct(self, element_type: Any, props: Optional[Dict[str, Any]], *children: Any) -> Element:
        return Element(
            tag=element_type,
            props=dict(props or {}),
            children=flatten_children(children),
            owner=self.current_owner,
        )

    @property
    def current_owner(self) -> Optional[Component]:
        return self._owners[-1] if self._owners else None

    def owner_of(self, element: Any) -> Optional[Component]:
        return getattr(element, "owner", None)

    # lifecycle

    def mount(self, component: Any, props: Optional[Dict[str, Any]] = None) -> Component:
        if _is_component_type(component):
            component = component(props, host=self)
        component.host = self
        self._render_tree(component)
        component.mounted = True
        self._mounted.append(component)
        for child in component.child_components:
            child.mounted = True
            self._fire(child)
        self._fire(component)
        return component

    def update(self, component: Component, props: Optional[Dict[str, Any]] = None) -> Component:
        if not component.mounted:
            raise RuntimeError(f"{component.display_name} is not mounted")
        if props:
            component.props.update(props)
        for child in component.child_components:
            self._drop(child)
        self._render_tree(component)
        for child in component.child_components:
            child.mounted = True
            self._fire(child)
        self._fire(component)
        return component

    def unmount(self, component: Component) -> None:
        if component in self._mounted:
            self._mounted.remove(component)
        for child in component.child_components:
            self._drop(child)
        self._drop(component)
        component.tree = None

    def after_render(self, component: Component, callback: Callable[[], None]) -> None:
        """Run `callback` once, at the component's next mount or update."""
        self._pending.setdefault(component, []).append(callback)

    def find_node(self, element_id: str) -> Optional[Element]:
        for component in self._mounted:
            for root in flatten_children([component.tree]):
                if not isinstance(root, Element):
                    continue
                for node in root.iter_elements():
                    if node.id == element_id:
                        return node
        return None

    def _render_tree(self, component: Component) -> None:
        fresh: List[Component] = []
        component.tree = self._render(component, fresh)
        component.child_components = fresh

    def _render(self, component: Component, fresh: List[Component]) -> Any:
        self._owners.append(component)
        try:
            output = component.render()
        finally:
            self._owners.pop()
        return self._expand(output, fresh)

    def _expand(self, node: Any, fresh: List[Component]) -> Any:
        if isinstance(node, (list, tuple)):
            return flatten_children(self._expand(child, fresh) for child in node)
        if not isinstance(node, Element):
            return node
        if _is_component_type(node.tag):
            child = node.tag(node.props, host=self)
            output = self._render(child, fresh)
            # Post-order: nested components are mounted before their parents.
            fresh.append(child)
            return output
        node.children = flatten_children(self._expand(child, fresh) for child in node.children)
        return node

    def _fire(self, component: Component) -> None:
        # Callbacks registered while firing belong to this same milestone.
        while component in self._pending:
            for callback in self._pending.pop(component):
                callback()

    def _drop(self, component: Component) -> None:
        component.mounted = False
        self._pending.pop(component, None)
