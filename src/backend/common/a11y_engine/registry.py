from __future__ import annotations

from typing import Any, Dict, FrozenSet, Iterable, Iterator, List, Tuple, Type, Union

from .rule import PropRule, RenderRule, Rule, TagRule


class RuleRegistry:
    """Ordered rule tables consumed by the dispatcher.

    Each category is a list of (rule_key, rule) pairs kept in registration
    order; dispatch order (and so "first failure wins" in fatal mode) follows it.
    """

    def __init__(self, *, mobile_exclusions: Iterable[str] = ()):
        self._tags: Dict[str, List[Tuple[str, TagRule]]] = {}
        self._props: Dict[str, List[Tuple[str, PropRule]]] = {}
        self._render: List[Tuple[str, RenderRule]] = []
        self._mobile_exclusions: FrozenSet[str] = frozenset(mobile_exclusions)
        # Default host for dispatchers built without one; engines pass their own.
        self.host: Any = None

    def register(self, rule: Union[Rule, Type[Rule]]) -> Rule:
        if isinstance(rule, type):
            rule = rule()
        if not isinstance(rule, Rule):
            raise TypeError(f"Unsupported rule type: {type(rule).__name__}")
        key = getattr(rule, "rule_key", None)
        if not key:
            raise ValueError("Rule missing rule_key")

        if isinstance(rule, TagRule):
            table = self._tags.setdefault(rule.tag_name, [])
        elif isinstance(rule, PropRule):
            table = self._props.setdefault(rule.prop_name, [])
        else:
            table = self._render

        if any(existing == key for existing, _ in table):
            raise ValueError(f"Duplicate rule_key registered for {rule.category.value} {rule.target!r}: {key}")
        table.append((key, rule))
        return rule

    def tag_rules(self, tag_name: str) -> Tuple[Tuple[str, TagRule], ...]:
        return tuple(self._tags.get(tag_name, ()))

    def prop_rules(self, prop_name: str) -> Tuple[Tuple[str, PropRule], ...]:
        return tuple(self._props.get(prop_name, ()))

    def render_rules(self) -> Tuple[Tuple[str, RenderRule], ...]:
        return tuple(self._render)

    @property
    def mobile_exclusions(self) -> FrozenSet[str]:
        return self._mobile_exclusions

    def add_mobile_exclusions(self, *rule_keys: str) -> None:
        self._mobile_exclusions = self._mobile_exclusions | frozenset(rule_keys)

    def bind_host(self, host: Any) -> None:
        """Associate the registry with a host framework handle."""
        self.host = host

    def rules(self) -> Iterator[Rule]:
        for entries in self._tags.values():
            for _, rule in entries:
                yield rule
        for entries in self._props.values():
            for _, rule in entries:
                yield rule
        for _, rule in self._render:
            yield rule

    def keys(self) -> FrozenSet[str]:
        return frozenset(rule.rule_key for rule in self.rules())


registry = RuleRegistry()


def register_rule(rule_cls: Type[Rule]) -> Type[Rule]:
    registry.register(rule_cls)
    return rule_cls
