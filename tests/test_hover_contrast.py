"""Tests for the per-theme hover contrast verdicts."""

from pathlib import Path

from hover_audit.config.settings import HoverThresholds
from hover_audit.design.hover_contrast import FIXUP_PATH, RAW_PATH, check_themes, evaluate_theme
from hover_audit.design.theme_store import ThemeRecord
from hover_audit.errors import ContrastInadequate, MalformedColor, ThemeLoadError


def _record(name="t.json", **attrs):
    return ThemeRecord(name=name, path=Path(name), attributes=attrs)


def test_identical_colors_pass_via_fixup():
    v = evaluate_theme(_record(background="#1e1e1e", hover="#1e1e1e"))
    assert v.passed
    assert v.path == FIXUP_PATH
    assert v.distance == 0
    assert v.fixed_distance == 30
    assert "dist 0->30" in v.message()


def test_pure_black_fails_even_after_fixup():
    v = evaluate_theme(_record(background="#000000", hover="#010101"))
    assert not v.passed
    assert v.distance == 3
    assert v.fixed_distance == 3
    assert isinstance(v.failure, ContrastInadequate)
    assert v.failure.context["fixed_distance"] == 3
    assert "dist=3, fixed=3" in v.message()


def test_distinct_colors_pass_raw_without_fixup():
    v = evaluate_theme(_record(background="#202020", hover="#4a4a4a"))
    assert v.passed
    assert v.path == RAW_PATH
    assert v.distance == 126
    assert v.fixed_distance is None
    assert v.message() == "t.json: hover distinct (dist=126)"


def test_missing_hover_is_malformed():
    v = evaluate_theme(_record(background="#202020"))
    assert not v.passed
    assert isinstance(v.failure, MalformedColor)
    assert v.failure.context["attribute"] == "hover"
    assert "malformed color for 'hover': None" in v.message()


def test_bad_background_reported_with_value():
    v = evaluate_theme(_record(background="#zzzzzz", hover="#ffffff"))
    assert isinstance(v.failure, MalformedColor)
    assert "'#zzzzzz'" in v.message()


def test_load_error_fails_theme():
    rec = ThemeRecord(name="broken.json", path=Path("broken.json"), load_error="Invalid JSON: x")
    v = evaluate_theme(rec)
    assert not v.passed
    assert isinstance(v.failure, ThemeLoadError)


def test_thresholds_are_configurable():
    rec = _record(background="#202020", hover="#4a4a4a")
    strict = HoverThresholds(raw=200, fixed=100)
    v = evaluate_theme(rec, strict)
    assert not v.passed
    assert v.fixed_distance == 30
    lenient = HoverThresholds(raw=20, fixed=3)
    assert evaluate_theme(_record(background="#000000", hover="#000000"), lenient).passed


def test_check_themes_sorted_and_continues_after_failure():
    records = [
        _record("zeta.json", background="#202020", hover="#4a4a4a"),
        _record("alpha.json", background="#000000"),
        _record("mid.json", background="#1e1e1e", hover="#1e1e1e"),
    ]
    verdicts = check_themes(records)
    assert [v.theme for v in verdicts] == ["alpha.json", "mid.json", "zeta.json"]
    assert [v.passed for v in verdicts] == [False, True, True]


def test_as_dict_names_error_type():
    d = evaluate_theme(_record(background="#000000", hover="#000000")).as_dict()
    assert d["passed"] is False
    assert d["error"] == "ContrastInadequate"
    assert d["fixed_distance"] == 3
