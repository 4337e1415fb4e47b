"""
Structure lint tests.
Verify that every component follows the package layout conventions.
"""

from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent
PACKAGE = PROJECT_ROOT / "freqtable"
COMPONENTS = ["frequency", "cases", "report"]


class TestProjectStructure:
    """Verify project structure follows package conventions."""

    def test_core_directories_exist(self) -> None:
        assert (PACKAGE / "components").is_dir()
        assert (PACKAGE / "rules").is_dir()
        assert (PACKAGE / "adapters").is_dir()
        assert (PACKAGE / "app_shell").is_dir()

    def test_rules_file_exists(self) -> None:
        assert (PROJECT_ROOT / "rules.yaml").is_file()

    def test_tests_structure_exists(self) -> None:
        assert (PROJECT_ROOT / "tests" / "unit").is_dir()
        assert (PROJECT_ROOT / "tests" / "regression").is_dir()

    def test_init_files_present(self) -> None:
        """Python packages must have __init__.py files."""
        packages = [
            "freqtable",
            "freqtable/components",
            "freqtable/rules",
            "freqtable/adapters",
            "freqtable/app_shell",
        ]
        for pkg in packages:
            init_file = PROJECT_ROOT / pkg / "__init__.py"
            assert init_file.is_file(), f"Missing __init__.py in {pkg}"


@pytest.mark.parametrize("name", COMPONENTS)
class TestComponentLayout:
    """Each component has models, an implementation, entry points and tests."""

    def test_component_files(self, name: str) -> None:
        component = PACKAGE / "components" / name
        for filename in ["__init__.py", "models.py", "_impl.py", "component.py"]:
            assert (component / filename).is_file(), f"{name} missing {filename}"

    def test_component_tests(self, name: str) -> None:
        tests_dir = PACKAGE / "components" / name / "tests"
        assert any(tests_dir.glob("test_*.py")), f"{name} has no tests"

    def test_exports_run(self, name: str) -> None:
        import importlib

        module = importlib.import_module(f"freqtable.components.{name}")
        assert callable(module.run)
        assert "run" in module.__all__
