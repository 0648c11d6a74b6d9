import pytest

from common.a11y_engine.models import RuleCategory
from common.a11y_engine.registry import RuleRegistry


def test_rules_keep_registration_order(make_registry, tag_rule, prop_rule, render_rule):
    registry = make_registry(
        tag_rule("B", "img"),
        tag_rule("A", "img"),
        prop_rule("Z", "on_click"),
        prop_rule("Y", "on_click"),
        render_rule("R2", lambda *a: None),
        render_rule("R1", lambda *a: None),
    )
    assert [key for key, _ in registry.tag_rules("img")] == ["B", "A"]
    assert [key for key, _ in registry.prop_rules("on_click")] == ["Z", "Y"]
    assert [key for key, _ in registry.render_rules()] == ["R2", "R1"]
    assert registry.tag_rules("div") == ()
    assert registry.keys() == frozenset({"A", "B", "Y", "Z", "R1", "R2"})


def test_duplicate_key_for_same_target_is_rejected(make_registry, tag_rule):
    registry = make_registry(tag_rule("NO_ALT", "img"))
    with pytest.raises(ValueError, match="Duplicate rule_key"):
        registry.register(tag_rule("NO_ALT", "img"))
    # The same key may guard a different tag.
    registry.register(tag_rule("NO_ALT", "area"))
    assert [key for key, _ in registry.tag_rules("area")] == ["NO_ALT"]


def test_register_accepts_rule_classes():
    from common.a11y_engine.rules.images import NO_ALT

    registry = RuleRegistry()
    rule = registry.register(NO_ALT)
    assert isinstance(rule, NO_ALT)
    assert rule.category == RuleCategory.TAG
    assert rule.target == "img"


def test_register_rejects_non_rules():
    with pytest.raises(TypeError):
        RuleRegistry().register(object())


def test_mobile_exclusions_accumulate():
    registry = RuleRegistry(mobile_exclusions=["A"])
    registry.add_mobile_exclusions("B", "A")
    assert registry.mobile_exclusions == frozenset({"A", "B"})
