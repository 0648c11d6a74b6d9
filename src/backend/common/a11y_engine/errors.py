"""Exception classes raised by the accessibility engine."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import FailureInfo


class A11yError(Exception):
    """Base class for engine errors."""


class ConfigurationError(A11yError, ValueError):
    """Raised at install time (or config load time) when setup inputs are invalid."""


class ValidationFailure(A11yError, AssertionError):
    """Raised when a rule fails and the engine runs with `throw_on_failure`."""

    def __init__(self, message: str, failure: FailureInfo):
        super().__init__(message)
        self.failure = failure


__all__ = [
    "A11yError",
    "ConfigurationError",
    "ValidationFailure",
]
