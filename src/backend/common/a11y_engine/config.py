from __future__ import annotations

import os
from typing import Any, Callable, List, Mapping, Optional, Union

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigurationError
from .models import Device

FilterFn = Callable[[str, str], bool]

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


class A11yConfig(BaseModel):
    """Engine configuration.

    The engine keeps a reference to this object and re-reads it on every
    construction call, so assigning a field takes effect immediately.
    """

    model_config = ConfigDict(validate_assignment=True)

    exclude: List[str] = Field(default_factory=list)
    device: Device = Device.DEFAULT
    throw_on_failure: bool = False
    include_source_reference: bool = False
    # Called as filter_fn(element_name, element_id); returning False suppresses the failure.
    filter_fn: Optional[FilterFn] = None

    @field_validator("exclude", mode="before")
    @classmethod
    def _coerce_exclude(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return list(value)

    @classmethod
    def from_env(cls, **overrides: Any) -> "A11yConfig":
        """Load configuration from A11Y_* environment variables (and a .env file if present).

        Reads A11Y_EXCLUDE (comma separated rule keys), A11Y_DEVICE,
        A11Y_THROW_ON_FAILURE and A11Y_INCLUDE_SOURCE_REFERENCE. Keyword
        overrides win over the environment.
        """
        load_dotenv()
        raw: dict[str, Any] = {
            "exclude": [k.strip() for k in os.getenv("A11Y_EXCLUDE", "").split(",") if k.strip()],
            "device": os.getenv("A11Y_DEVICE", Device.DEFAULT.value).strip().lower() or Device.DEFAULT.value,
            "throw_on_failure": _env_flag("A11Y_THROW_ON_FAILURE"),
            "include_source_reference": _env_flag("A11Y_INCLUDE_SOURCE_REFERENCE"),
        }
        raw.update(overrides)
        try:
            return cls.model_validate(raw)
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid accessibility configuration: {exc}") from exc


def _env_flag(name: str) -> bool:
    value = os.getenv(name, "").strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name} must be a boolean flag (got {value!r}).")


def coerce_config(value: Union[A11yConfig, Mapping[str, Any], None]) -> A11yConfig:
    if value is None:
        return A11yConfig()
    if isinstance(value, A11yConfig):
        return value
    if isinstance(value, Mapping):
        try:
            return A11yConfig.model_validate(dict(value))
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid accessibility configuration: {exc}") from exc
    raise ConfigurationError(f"Unsupported configuration type: {type(value).__name__}")
