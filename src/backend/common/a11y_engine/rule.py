from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Optional, Sequence

from .models import RuleCategory

# A render rule's report callback takes no arguments: tag, props and message are pre-bound.
ReportFn = Callable[[], None]


class Rule(ABC):
    rule_key: str
    msg: str
    category: RuleCategory

    def __init__(self):
        if not getattr(self, "rule_key", None):
            raise ValueError("Rule must define rule_key")
        if not getattr(self, "msg", None):
            raise ValueError(f"Rule {self.rule_key} must define msg")

    @property
    def target(self) -> Optional[str]:
        return None


class TagRule(Rule):
    category = RuleCategory.TAG
    tag_name: str

    @property
    def target(self) -> Optional[str]:
        return self.tag_name

    @abstractmethod
    def test(self, tag_name: str, props: Dict[str, Any], children: Sequence[Any]) -> bool:  # pragma: no cover
        raise NotImplementedError


class PropRule(Rule):
    category = RuleCategory.PROP
    prop_name: str

    @property
    def target(self) -> Optional[str]:
        return self.prop_name

    @abstractmethod
    def test(self, tag_name: str, props: Dict[str, Any], children: Sequence[Any]) -> bool:  # pragma: no cover
        raise NotImplementedError


class RenderRule(Rule):
    """Runs against every element; reports through a callback, possibly after mount.

    `host` is the UI host performing the construction being checked.
    """

    category = RuleCategory.RENDER

    @abstractmethod
    def test(
        self,
        tag_name: str,
        props: Dict[str, Any],
        children: Sequence[Any],
        report: ReportFn,
        host: Any = None,
    ) -> None:  # pragma: no cover
        raise NotImplementedError
