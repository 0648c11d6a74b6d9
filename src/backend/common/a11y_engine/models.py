from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Tuple, Union

from pydantic import BaseModel


class Device(str, Enum):
    DEFAULT = "default"
    MOBILE = "mobile"


class RuleCategory(str, Enum):
    TAG = "tag"
    PROP = "prop"
    RENDER = "render"


@dataclass(frozen=True)
class ElementDescriptor:
    tag_name: str
    # Insertion order is the order props were supplied to construction.
    props: Dict[str, Any]
    children: Tuple[Any, ...]
    id: str


class FailureInfo(BaseModel):
    element_name: str
    element_id: str
    message: str


@dataclass(frozen=True)
class ComponentInstance:
    name: str

    @property
    def element_name(self) -> str:
        return self.name


@dataclass(frozen=True)
class PlainElement:
    tag: str
    id: str

    @property
    def element_name(self) -> str:
        return f"{self.tag}#{self.id}"


ElementOrigin = Union[ComponentInstance, PlainElement]
