"""Runtime accessibility assertions for declarative UI element construction.

This package intentionally contains only engine logic:
- Rules run against each element's tag name, props and children as it is built.
- The host UI framework is reached only through the seams in `host.py`.
"""

from .config import A11yConfig
from .errors import A11yError, ConfigurationError, ValidationFailure
from .identity import IdentityAllocator
from .interceptor import A11yEngine, install
from .models import (
    ComponentInstance,
    Device,
    ElementDescriptor,
    FailureInfo,
    PlainElement,
)
from .registry import RuleRegistry, register_rule, registry
from .reporter import FailureReporter
from .rule import PropRule, RenderRule, TagRule
from .runner import RuleDispatcher

# Import built-in rules so they self-register with the global registry.
from . import rules as _builtin_rules  # noqa: F401

__all__ = [
    "A11yConfig",
    "A11yEngine",
    "A11yError",
    "ComponentInstance",
    "ConfigurationError",
    "Device",
    "ElementDescriptor",
    "FailureInfo",
    "FailureReporter",
    "IdentityAllocator",
    "PlainElement",
    "PropRule",
    "RenderRule",
    "RuleDispatcher",
    "RuleRegistry",
    "TagRule",
    "ValidationFailure",
    "install",
    "register_rule",
    "registry",
]
