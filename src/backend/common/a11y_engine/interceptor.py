from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Union

from .config import A11yConfig, coerce_config
from .errors import ConfigurationError
from .host import CreateElement, ElementHost, display_name, has_hook, owner_of
from .identity import IdentityAllocator, allocator as default_allocator
from .models import ComponentInstance, ElementDescriptor, ElementOrigin, PlainElement
from .registry import RuleRegistry
from .reporter import FailureReporter
from .runner import RuleDispatcher

logger = logging.getLogger(__name__)


class A11yEngine:
    """Construction middleware that checks every plain element as it is built."""

    def __init__(
        self,
        host: Any,
        config: A11yConfig,
        *,
        rules: Optional[RuleRegistry] = None,
        allocator: Optional[IdentityAllocator] = None,
    ):
        self.host = host
        self.config = config
        self.dispatcher = RuleDispatcher(rules, host=host)
        self.allocator = allocator if allocator is not None else default_allocator

    @property
    def registry(self) -> RuleRegistry:
        return self.dispatcher.registry

    def middleware(
        self,
        next_create: CreateElement,
        element_type: Any,
        props: Optional[Mapping[str, Any]],
        *children: Any,
    ) -> Any:
        props = dict(props) if props is not None else {}
        element_id = self.allocator.allocate(props.get("id"))
        props["id"] = element_id

        element = next_create(element_type, props, *children)

        # Component references are checked through the plain elements they render.
        if isinstance(element_type, str):
            owner = owner_of(self.host, element)
            origin = self.resolve_origin(owner, element_type, element_id)
            reporter = FailureReporter(
                self.config,
                origin.element_name,
                element_id,
                owner=owner,
                host=self.host,
            )
            descriptor = ElementDescriptor(
                tag_name=element_type,
                props=props,
                children=tuple(children),
                id=element_id,
            )
            self.dispatcher.dispatch(descriptor, self.config, reporter)

        return element

    @staticmethod
    def resolve_origin(owner: Any, tag_name: str, element_id: str) -> ElementOrigin:
        name = display_name(owner) if owner is not None else None
        if name:
            return ComponentInstance(name=name)
        return PlainElement(tag=tag_name, id=element_id)


def install(
    host: Any,
    config: Union[A11yConfig, Mapping[str, Any], None] = None,
    *,
    rules: Optional[RuleRegistry] = None,
    allocator: Optional[IdentityAllocator] = None,
) -> A11yEngine:
    """Install accessibility checks on a host's element-construction entry point.

    Prefers the host's `add_middleware` extension point; hosts without one get
    their `create_element` attribute replaced by a wrapping function.
    """
    if host is None or not isinstance(host, ElementHost):
        raise ConfigurationError("Missing parameter: host must expose a create_element entry point")

    engine = A11yEngine(host, coerce_config(config), rules=rules, allocator=allocator)
    engine.registry.bind_host(host)

    if has_hook(host, "add_middleware"):
        host.add_middleware(engine.middleware)
    else:
        original = host.create_element

        def create_element(element_type: Any, props: Optional[Mapping[str, Any]] = None, *children: Any) -> Any:
            return engine.middleware(original, element_type, props, *children)

        host.create_element = create_element

    logger.debug(
        "Installed accessibility checks on %s (device=%s, throw_on_failure=%s)",
        type(host).__name__,
        engine.config.device.value,
        engine.config.throw_on_failure,
    )
    return engine
