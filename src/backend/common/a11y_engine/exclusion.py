from __future__ import annotations

from typing import FrozenSet, Iterable

from .config import A11yConfig
from .models import Device


def effective_exclusions(config: A11yConfig, mobile_exclusions: Iterable[str] = ()) -> FrozenSet[str]:
    excluded = set(config.exclude)
    if config.device == Device.MOBILE:
        excluded.update(mobile_exclusions)
    return frozenset(excluded)


def should_run(rule_key: str, config: A11yConfig, mobile_exclusions: Iterable[str] = ()) -> bool:
    # Recomputed per call: the config object may be mutated between constructions.
    return rule_key not in effective_exclusions(config, mobile_exclusions)
