"""Pytest configuration: shared fixtures for convention tests.

Run pytest from this project's root; pythonpath in pyproject.toml puts src/
and the project root on the import path.
"""

from pathlib import Path
from textwrap import dedent
from typing import Callable

import pytest


@pytest.fixture
def write_module(tmp_path: Path) -> Callable[[str, str], str]:
    """Write dedented source under tmp_path and return its absolute path."""

    def _write(name: str, source: str) -> str:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(dedent(source), encoding="utf-8")
        return str(path.resolve())

    return _write
