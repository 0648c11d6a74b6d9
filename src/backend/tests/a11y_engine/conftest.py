import logging
import os
import sys


# Ensure `src/backend` is on sys.path so imports like `import common...` work.
BACKEND_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "../.."))
if BACKEND_DIR not in sys.path:
    sys.path.insert(0, BACKEND_DIR)

import pytest

from adapters.ui_host import UIHost
from common.a11y_engine.config import A11yConfig
from common.a11y_engine.identity import IdentityAllocator
from common.a11y_engine.registry import RuleRegistry
from common.a11y_engine.rule import PropRule, RenderRule, TagRule

REPORTER_LOGGER = "common.a11y_engine.reporter"


class FnTagRule(TagRule):
    def __init__(self, rule_key, tag_name, fn, msg):
        self.rule_key = rule_key
        self.tag_name = tag_name
        self.msg = msg
        self.fn = fn
        self.calls = 0
        super().__init__()

    def test(self, tag_name, props, children):
        self.calls += 1
        return self.fn(tag_name, props, children)


class FnPropRule(PropRule):
    def __init__(self, rule_key, prop_name, fn, msg):
        self.rule_key = rule_key
        self.prop_name = prop_name
        self.msg = msg
        self.fn = fn
        self.calls = 0
        super().__init__()

    def test(self, tag_name, props, children):
        self.calls += 1
        return self.fn(tag_name, props, children)


class FnRenderRule(RenderRule):
    def __init__(self, rule_key, fn, msg):
        self.rule_key = rule_key
        self.msg = msg
        self.fn = fn
        self.calls = 0
        self.host = None
        super().__init__()

    def test(self, tag_name, props, children, report, host=None):
        self.calls += 1
        # Last host seen, for fns that defer through it.
        self.host = host
        self.fn(self, tag_name, props, children, report)


@pytest.fixture
def tag_rule():
    def _make(rule_key, tag_name, fn=lambda tag, props, children: False, msg=None):
        return FnTagRule(rule_key, tag_name, fn, msg or f"{rule_key} failed")

    return _make


@pytest.fixture
def prop_rule():
    def _make(rule_key, prop_name, fn=lambda tag, props, children: False, msg=None):
        return FnPropRule(rule_key, prop_name, fn, msg or f"{rule_key} failed")

    return _make


@pytest.fixture
def render_rule():
    def _make(rule_key, fn, msg=None):
        return FnRenderRule(rule_key, fn, msg or f"{rule_key} failed")

    return _make


@pytest.fixture
def make_registry():
    def _make(*rules, mobile_exclusions=()):
        registry = RuleRegistry(mobile_exclusions=mobile_exclusions)
        for rule in rules:
            registry.register(rule)
        return registry

    return _make


@pytest.fixture
def make_config():
    def _make(**kwargs) -> A11yConfig:
        return A11yConfig(**kwargs)

    return _make


@pytest.fixture
def allocator() -> IdentityAllocator:
    return IdentityAllocator()


@pytest.fixture
def host() -> UIHost:
    return UIHost()


@pytest.fixture
def img_alt_rule(tag_rule):
    return tag_rule(
        "NO_ALT",
        "img",
        lambda tag, props, children: props.get("alt") is not None,
        msg="needs an alt prop",
    )


@pytest.fixture
def diagnostics(caplog):
    caplog.set_level(logging.WARNING, logger=REPORTER_LOGGER)

    def _collect():
        return [
            tuple(record.args)
            for record in caplog.records
            if record.name == REPORTER_LOGGER and record.levelno == logging.WARNING
        ]

    return _collect
