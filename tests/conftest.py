from pathlib import Path

import pytest

from freqtable.rules.models import Rules

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def project_root() -> Path:
    return PROJECT_ROOT


@pytest.fixture
def default_rules() -> Rules:
    return Rules()


@pytest.fixture
def rules_file(tmp_path):
    """Write a rules file and return its path."""

    def _write(content: str) -> Path:
        path = tmp_path / "rules.yaml"
        path.write_text(content, encoding="utf-8")
        return path

    return _write
