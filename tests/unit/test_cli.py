import io
import json
from pathlib import Path

import pytest

from freqtable.app_shell.cli import EXIT_BAD_INPUT, EXIT_FAILED, EXIT_OK, get_rules, main
from freqtable.rules.models import Rules


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run from an empty directory with no rules override."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("FREQTABLE_RULES", raising=False)
    return tmp_path


class TestCount:
    def test_count_argument(self, capsys) -> None:
        assert main(["count", '[1, 2, 2, "2", null]']) == EXIT_OK
        assert json.loads(capsys.readouterr().out) == {"1": 1, "2": 3, "null": 1}

    def test_count_stdin(self, capsys, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO('["🚀", "🍌", "🚀"]'))
        assert main(["count"]) == EXIT_OK
        out = capsys.readouterr().out
        assert out.strip() == '{"🚀": 2, "🍌": 1}'

    def test_count_top(self, capsys) -> None:
        assert main(["count", '["a", "b", "b", "c", "c", "c"]', "--top", "2"]) == EXIT_OK
        assert json.loads(capsys.readouterr().out) == {"c": 3, "b": 2}

    def test_count_non_array(self, capsys, caplog: pytest.LogCaptureFixture) -> None:
        assert main(["count", '{"a": 1}']) == EXIT_FAILED
        assert "Input must be an array" in caplog.text
        assert capsys.readouterr().out == ""

    def test_count_string_document(self, caplog: pytest.LogCaptureFixture) -> None:
        assert main(["count", '"abc"']) == EXIT_FAILED
        assert "Input must be an array" in caplog.text

    def test_count_rules_after_subcommand(self, capsys, isolated_cwd: Path) -> None:
        rules_path = isolated_cwd / "custom.yaml"
        rules_path.write_text("logging:\n  level: WARNING\n", encoding="utf-8")

        assert main(["count", "[1, 1]", "--rules", str(rules_path), "--top", "1"]) == EXIT_OK
        assert json.loads(capsys.readouterr().out) == {"1": 2}

    def test_count_missing_rules_after_subcommand(self, caplog: pytest.LogCaptureFixture) -> None:
        assert main(["count", "[1]", "--rules", "missing.yaml"]) == EXIT_BAD_INPUT
        assert "Rules file not found" in caplog.text

    def test_count_malformed_json(self, caplog: pytest.LogCaptureFixture) -> None:
        assert main(["count", "[1, 2"]) == EXIT_BAD_INPUT
        assert "Invalid JSON input" in caplog.text


class TestSelftest:
    def test_selftest_passes(self, capsys) -> None:
        assert main(["selftest"]) == EXIT_OK
        out = capsys.readouterr().out
        assert "TEST RESULTS TABLE" in out
        assert "TC-015: Input validation (object)" in out
        assert "| 15/15 " in out
        assert "All tests passed!" in out

    def test_selftest_uses_rules(self, capsys, isolated_cwd: Path) -> None:
        rules_path = isolated_cwd / "custom.yaml"
        rules_path.write_text("report:\n  banner_width: 12\n", encoding="utf-8")

        assert main(["--rules", str(rules_path), "selftest"]) == EXIT_OK
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "=" * 12


    def test_rules_after_subcommand(self, capsys, isolated_cwd: Path) -> None:
        rules_path = isolated_cwd / "custom.yaml"
        rules_path.write_text("report:\n  banner_width: 12\n", encoding="utf-8")

        assert main(["selftest", "--rules", str(rules_path)]) == EXIT_OK
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "=" * 12

    def test_rules_before_subcommand_kept(self, capsys, isolated_cwd: Path) -> None:
        rules_path = isolated_cwd / "custom.yaml"
        rules_path.write_text("report:\n  banner_width: 9\n", encoding="utf-8")

        assert main(["--rules", str(rules_path), "selftest"]) == EXIT_OK
        assert capsys.readouterr().out.splitlines()[0] == "=" * 9


class TestGetRules:
    def test_defaults_without_file(self) -> None:
        assert get_rules(None) == Rules()

    def test_cwd_rules_file(self, isolated_cwd: Path) -> None:
        (isolated_cwd / "rules.yaml").write_text("cases:\n  fail_fast: true\n")
        assert get_rules(None).cases.fail_fast is True

    def test_env_override(self, isolated_cwd: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        path = isolated_cwd / "env.yaml"
        path.write_text("report:\n  sample_size: 1\n")
        monkeypatch.setenv("FREQTABLE_RULES", str(path))
        assert get_rules(None).report.sample_size == 1

    def test_missing_rules_exit_code(self, caplog: pytest.LogCaptureFixture) -> None:
        assert main(["--rules", "missing.yaml", "selftest"]) == EXIT_BAD_INPUT
        assert "Rules file not found" in caplog.text
