import json

import pytest

from common.a11y_engine import A11yConfig
from common.a11y_engine.rules import NO_ALT, NO_LABEL, NO_ROLE, NO_TABINDEX
from scripts.run_a11y_audit import main, run_audit


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ("A11Y_EXCLUDE", "A11Y_DEVICE", "A11Y_THROW_ON_FAILURE", "A11Y_INCLUDE_SOURCE_REFERENCE"):
        monkeypatch.delenv(key, raising=False)


def test_audit_reports_sample_violations_in_order():
    result = run_audit(A11yConfig())
    assert result["error"] is None
    assert result["diagnostics"] == [
        ["Toolbar", NO_ROLE.msg],
        ["Toolbar", NO_TABINDEX.msg],
        ["Avatar", NO_ALT.msg],
        ["IconButton", NO_LABEL.msg],
    ]


def test_audit_mobile_profile_drops_keyboard_rules():
    result = run_audit(A11yConfig(device="mobile"))
    assert [d[1] for d in result["diagnostics"]] == [NO_ROLE.msg, NO_ALT.msg, NO_LABEL.msg]


def test_audit_throw_stops_at_first_failure():
    result = run_audit(A11yConfig(throw_on_failure=True))
    assert result["diagnostics"] == []
    assert result["error"] == f"Toolbar {NO_ROLE.msg}"


def test_main_json_output_and_exit_code(capsys):
    code = main(["--json", "--exclude", "NO_ROLE", "--exclude", "NO_TABINDEX", "--exclude", "NO_ALT", "--exclude", "NO_LABEL"])
    payload = json.loads(capsys.readouterr().out)
    assert code == 0
    assert payload["diagnostics"] == []
    assert payload["device"] == "default"


def test_main_text_output(capsys):
    code = main(["--include-source-reference"])
    out = capsys.readouterr().out
    assert code == 1
    assert "Avatar" in out
    assert '<button type="button" id="a11y-' in out
