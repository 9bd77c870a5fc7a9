"""Unit tests for pyproject.toml discovery."""

from pathlib import Path

from convention_linter.infrastructure.config_file_loader import ConfigFileLoader


def test_reads_section_from_nearest_pyproject(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        '[tool.convention-lint]\npedantic = true\ndisable = ["empty dict"]\n', encoding="utf-8"
    )
    nested = tmp_path / "src" / "pkg"
    nested.mkdir(parents=True)

    assert ConfigFileLoader.load_config_from_fs(nested) == {
        "pedantic": True,
        "disable": ["empty dict"],
    }


def test_nearest_pyproject_without_section_gives_empty(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text('[tool.convention-lint]\nformat = "json"\n', encoding="utf-8")
    inner = tmp_path / "inner"
    inner.mkdir()
    (inner / "pyproject.toml").write_text("[project]\nname = 'x'\n", encoding="utf-8")

    assert ConfigFileLoader.load_config_from_fs(inner) == {}


def test_malformed_pyproject_gives_empty(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text("[tool\n", encoding="utf-8")
    assert ConfigFileLoader.load_config_from_fs(tmp_path) == {}
