from __future__ import annotations

from functools import partial
from typing import Any, Callable, Dict, Optional, Sequence

from .config import A11yConfig
from .exclusion import should_run
from .models import ElementDescriptor
from .registry import RuleRegistry, registry

OnFailure = Callable[[str, Dict[str, Any], str], None]


class RuleDispatcher:
    """Runs tag, prop and render rules against one element, in that order.

    `on_failure(tag_name, props, msg)` is called once per failing rule. If it
    raises, the remaining rules for the element are not evaluated.
    """

    def __init__(self, rules: Optional[RuleRegistry] = None, *, host: Any = None):
        self._registry = rules if rules is not None else registry
        # Passed to render rules so deferred checks use the host doing the construction.
        self.host = host if host is not None else self._registry.host

    @property
    def registry(self) -> RuleRegistry:
        return self._registry

    def dispatch(self, element: ElementDescriptor, config: A11yConfig, on_failure: OnFailure) -> None:
        self.run_all(element.tag_name, element.props, element.children, config, on_failure)

    def run_all(
        self,
        tag_name: str,
        props: Dict[str, Any],
        children: Sequence[Any],
        config: A11yConfig,
        on_failure: OnFailure,
    ) -> None:
        for run in (self.run_tag_rules, self.run_prop_rules, self.run_render_rules):
            run(tag_name, props, children, config, on_failure)

    def run_tag_rules(
        self,
        tag_name: str,
        props: Dict[str, Any],
        children: Sequence[Any],
        config: A11yConfig,
        on_failure: OnFailure,
    ) -> None:
        for key, rule in self._registry.tag_rules(tag_name):
            failed = self._should_run(key, config) and not rule.test(tag_name, props, children)
            if failed:
                on_failure(tag_name, props, rule.msg)

    def run_prop_rules(
        self,
        tag_name: str,
        props: Dict[str, Any],
        children: Sequence[Any],
        config: A11yConfig,
        on_failure: OnFailure,
    ) -> None:
        for prop_name, value in list(props.items()):
            if value is None:
                continue
            for key, rule in self._registry.prop_rules(prop_name):
                failed = self._should_run(key, config) and not rule.test(tag_name, props, children)
                if failed:
                    on_failure(tag_name, props, rule.msg)

    def run_render_rules(
        self,
        tag_name: str,
        props: Dict[str, Any],
        children: Sequence[Any],
        config: A11yConfig,
        on_failure: OnFailure,
    ) -> None:
        for key, rule in self._registry.render_rules():
            if self._should_run(key, config):
                rule.test(
                    tag_name,
                    props,
                    children,
                    partial(on_failure, tag_name, props, rule.msg),
                    self.host,
                )

    def _should_run(self, rule_key: str, config: A11yConfig) -> bool:
        return should_run(rule_key, config, self._registry.mobile_exclusions)
