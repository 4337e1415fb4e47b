from pathlib import Path

import pytest

from freqtable.rules.loader import load_rules
from freqtable.rules.models import Rules


def test_load_project_rules(project_root: Path) -> None:
    rules = load_rules(project_root / "rules.yaml")

    assert rules.report.columns.name == 35
    assert rules.report.banner_width == 130
    assert rules.report.large_input_threshold == 20
    assert rules.cases.fail_fast is False
    assert rules.logging.level == "INFO"


def test_project_rules_match_defaults(project_root: Path, default_rules: Rules) -> None:
    assert load_rules(project_root / "rules.yaml") == default_rules


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="Rules file not found"):
        load_rules(tmp_path / "nope.yaml")


def test_empty_file_uses_defaults(rules_file) -> None:
    assert load_rules(rules_file("")) == Rules()


def test_partial_file(rules_file) -> None:
    rules = load_rules(rules_file("cases:\n  fail_fast: true\n"))

    assert rules.cases.fail_fast is True
    assert rules.report.columns.error == 25


def test_invalid_yaml(rules_file) -> None:
    with pytest.raises(ValueError, match="Invalid YAML syntax"):
        load_rules(rules_file("report: [unclosed"))


def test_unknown_section(rules_file) -> None:
    with pytest.raises(ValueError, match="Rules validation failed"):
        load_rules(rules_file("metrics:\n  enabled: true\n"))


def test_column_too_narrow(rules_file) -> None:
    with pytest.raises(ValueError, match="Rules validation failed"):
        load_rules(rules_file("report:\n  columns:\n    error: 2\n"))


def test_sample_larger_than_threshold(rules_file) -> None:
    content = "report:\n  large_input_threshold: 2\n  sample_size: 5\n"
    with pytest.raises(ValueError, match="sample_size must not exceed"):
        load_rules(rules_file(content))


def test_invalid_log_level(rules_file) -> None:
    with pytest.raises(ValueError, match="Rules validation failed"):
        load_rules(rules_file("logging:\n  level: LOUD\n"))


@pytest.mark.parametrize(
    "content",
    [
        "report:\n  banner_widht: 10\n",
        "report:\n  columns:\n    nmae: 10\n",
        "cases:\n  failfast: true\n",
        "logging:\n  lvl: DEBUG\n",
    ],
)
def test_misspelled_nested_key(rules_file, content: str) -> None:
    with pytest.raises(ValueError, match="Rules validation failed"):
        load_rules(rules_file(content))
