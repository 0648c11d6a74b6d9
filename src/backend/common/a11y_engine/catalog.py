from __future__ import annotations

import argparse
import json
from typing import Any, List, Optional

from pydantic import BaseModel

from .models import RuleCategory
from .registry import RuleRegistry, registry

# Ensure built-in rules are imported/registered when generating a catalog.
from . import rules as _builtin_rules  # noqa: F401

_CATEGORY_ORDER = {RuleCategory.TAG: 0, RuleCategory.PROP: 1, RuleCategory.RENDER: 2}


class RuleCatalogEntry(BaseModel):
    rule_key: str
    category: RuleCategory
    target: Optional[str] = None
    msg: str

    module: str
    class_name: str

    mobile_excluded: bool = False


def build_catalog(rules: Optional[RuleRegistry] = None) -> List[RuleCatalogEntry]:
    source = rules if rules is not None else registry
    entries: List[RuleCatalogEntry] = []
    for rule in source.rules():
        entries.append(
            RuleCatalogEntry(
                rule_key=rule.rule_key,
                category=rule.category,
                target=rule.target,
                msg=rule.msg,
                module=type(rule).__module__,
                class_name=type(rule).__name__,
                mobile_excluded=rule.rule_key in source.mobile_exclusions,
            )
        )

    entries.sort(key=lambda e: (_CATEGORY_ORDER[e.category], e.target or "", e.rule_key))
    return entries


def _dump_json(catalog: list[dict[str, Any]]) -> str:
    return json.dumps(catalog, indent=2, sort_keys=True)


def _dump_yaml(catalog: list[dict[str, Any]]) -> str:
    import yaml

    return yaml.safe_dump(catalog, sort_keys=True)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Generate an accessibility rules catalog from the registry.")
    parser.add_argument(
        "--format",
        choices=("yaml", "json"),
        default="yaml",
        help="Output format (default: yaml).",
    )
    args = parser.parse_args(argv)

    catalog = [e.model_dump(mode="json") for e in build_catalog()]
    if args.format == "json":
        print(_dump_json(catalog))
    else:
        print(_dump_yaml(catalog))


if __name__ == "__main__":
    main()
