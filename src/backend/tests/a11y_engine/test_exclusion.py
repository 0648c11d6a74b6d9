from common.a11y_engine.exclusion import effective_exclusions, should_run
from common.a11y_engine.models import Device

MOBILE = ("NO_TABINDEX", "BUTTON_ROLE_SPACE")


def test_excluded_keys_never_run_on_any_device(make_config):
    for device in (Device.DEFAULT, Device.MOBILE):
        cfg = make_config(exclude=["NO_ALT", "NO_ROLE"], device=device)
        assert should_run("NO_ALT", cfg, MOBILE) is False
        assert should_run("NO_ROLE", cfg, MOBILE) is False
        assert should_run("REDUNDANT_ALT", cfg, MOBILE) is True


def test_mobile_profile_merges_default_exclusions_once(make_config):
    cfg = make_config(exclude=["NO_ALT", "NO_TABINDEX", "NO_ALT"], device="mobile")
    assert effective_exclusions(cfg, MOBILE) == frozenset({"NO_ALT", "NO_TABINDEX", "BUTTON_ROLE_SPACE"})
    assert should_run("BUTTON_ROLE_SPACE", cfg, MOBILE) is False


def test_default_profile_ignores_mobile_exclusions(make_config):
    cfg = make_config()
    assert effective_exclusions(cfg, MOBILE) == frozenset()
    assert should_run("NO_TABINDEX", cfg, MOBILE) is True


def test_config_changes_apply_on_next_call(make_config):
    cfg = make_config()
    assert should_run("NO_TABINDEX", cfg, MOBILE) is True
    cfg.device = Device.MOBILE
    assert should_run("NO_TABINDEX", cfg, MOBILE) is False
    cfg.device = Device.DEFAULT
    cfg.exclude = ["NO_TABINDEX"]
    assert should_run("NO_TABINDEX", cfg, MOBILE) is False
