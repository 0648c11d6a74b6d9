from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any


def _ensure_backend_on_path() -> None:
    backend_dir = Path(__file__).resolve().parents[1]
    if str(backend_dir) not in sys.path:
        sys.path.insert(0, str(backend_dir))


_ensure_backend_on_path()

from adapters.ui_host import Component, Element, UIHost, render_html  # noqa: E402
from common.a11y_engine import A11yConfig, ValidationFailure, install  # noqa: E402
from common.a11y_engine import reporter as reporter_module  # noqa: E402


class Icon(Component):
    def render(self) -> Any:
        return self.el("svg", aria_hidden="true", view_box="0 0 16 16")


class IconButton(Component):
    def render(self) -> Any:
        return self.el("button", self.el(Icon), type="button")


class Avatar(Component):
    def render(self) -> Any:
        return self.el("img", src=self.props.get("src", "avatar.png"))


class Toolbar(Component):
    name = "Toolbar"

    def render(self) -> Any:
        return self.el(
            "div",
            self.el("span", "Menu", on_click=_noop),
            self.el(IconButton),
            self.el(Avatar, src="me.png"),
            role="toolbar",
            aria_label="Main toolbar",
        )


def _noop(*_: Any) -> None:
    return None


class DiagnosticCollector(logging.Handler):
    def __init__(self) -> None:
        super().__init__(level=logging.WARNING)
        self.diagnostics: list[list[str]] = []

    def emit(self, record: logging.LogRecord) -> None:
        args = record.args if isinstance(record.args, tuple) else (record.args,)
        self.diagnostics.append([_describe(arg) for arg in args])


def _describe(value: Any) -> str:
    if isinstance(value, Element):
        return render_html(value)
    return str(value)


def run_audit(config: A11yConfig, root: type[Component] = Toolbar) -> dict[str, Any]:
    host = UIHost()
    install(host, config)

    collector = DiagnosticCollector()
    logger = reporter_module.logger
    logger.addHandler(collector)
    error: str | None = None
    try:
        host.mount(root)
    except ValidationFailure as exc:
        error = str(exc)
    finally:
        logger.removeHandler(collector)

    return {
        "device": config.device.value,
        "throw_on_failure": config.throw_on_failure,
        "diagnostics": collector.diagnostics,
        "error": error,
    }


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Mount a sample component tree with accessibility checks installed and report violations."
    )
    parser.add_argument("--device", choices=("default", "mobile"), default=None, help="Device profile.")
    parser.add_argument(
        "--exclude",
        action="append",
        default=None,
        help="Rule key to skip (repeatable). Adds to A11Y_EXCLUDE.",
    )
    parser.add_argument("--throw", action="store_true", help="Raise on the first failing rule.")
    parser.add_argument(
        "--include-source-reference",
        action="store_true",
        help="Append the element id / rendered node to each diagnostic.",
    )
    parser.add_argument("--json", action="store_true", help="Print the audit result as JSON.")
    args = parser.parse_args(argv)

    overrides: dict[str, Any] = {}
    if args.device:
        overrides["device"] = args.device
    if args.throw:
        overrides["throw_on_failure"] = True
    if args.include_source_reference:
        overrides["include_source_reference"] = True
    config = A11yConfig.from_env(**overrides)
    if args.exclude:
        config.exclude = [*config.exclude, *args.exclude]

    result = run_audit(config)

    if args.json:
        print(json.dumps(result, indent=2))
    else:
        for diagnostic in result["diagnostics"]:
            print(" ".join(diagnostic))
        if result["error"]:
            print(f"ValidationFailure: {result['error']}")

    return 1 if result["diagnostics"] or result["error"] else 0


if __name__ == "__main__":
    raise SystemExit(main())
