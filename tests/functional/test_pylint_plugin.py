"""Run the plugin through a real pylint process."""

import os
import subprocess
import sys
from pathlib import Path

import pytest

PLUGIN_SRC = Path(__file__).resolve().parents[2] / "src"


def _run_pylint(cwd: Path, *args: str) -> list[str]:
    env = os.environ.copy()
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(PLUGIN_SRC), env.get("PYTHONPATH")]))
    cmd = [
        sys.executable,
        "-m",
        "pylint",
        *args,
        "--load-plugins=convention_linter.checker",
        "--disable=all",
        "--enable=inconsistent-convention",
        "--msg-template={path}:{line}:{column}: {msg_id}: {msg}",
        "--score=n",
        "--persistent=n",
    ]
    result = subprocess.run(cmd, cwd=cwd, capture_output=True, text=True, env=env)
    return sorted(line for line in result.stdout.splitlines() if ": W9701: " in line)


@pytest.fixture
def batch(tmp_path: Path) -> Path:
    (tmp_path / "first.py").write_text("a = []\nb = []\n", encoding="utf-8")
    (tmp_path / "second.py").write_text("c = list()\n", encoding="utf-8")
    return tmp_path


EXPECTED = ["second.py:1:4: W9701: empty list: use empty-list-lit instead of empty-list-call"]


def test_single_process_reports_deviation(batch: Path) -> None:
    assert _run_pylint(batch, "-j1", "first.py", "second.py") == EXPECTED


def test_parallel_jobs_elect_over_the_whole_batch(batch: Path) -> None:
    assert _run_pylint(batch, "-j2", "first.py", "second.py") == EXPECTED


def test_inline_disable_is_honored(batch: Path) -> None:
    (batch / "second.py").write_text(
        "c = list()  # pylint: disable=inconsistent-convention\n", encoding="utf-8"
    )
    assert _run_pylint(batch, "-j1", "first.py", "second.py") == []


def test_inline_disable_is_honored_in_parallel(batch: Path) -> None:
    (batch / "second.py").write_text(
        "c = list()  # pylint: disable=inconsistent-convention\n", encoding="utf-8"
    )
    assert _run_pylint(batch, "-j2", "first.py", "second.py") == []


def test_disable_in_one_file_does_not_hide_another(batch: Path) -> None:
    (batch / "first.py").write_text(
        "# pylint: disable=inconsistent-convention\na = []\nb = []\n", encoding="utf-8"
    )
    (batch / "second.py").write_text("c = list()\nd = []\n", encoding="utf-8")
    assert _run_pylint(batch, "-j1", "first.py", "second.py") == [
        "second.py:1:4: W9701: empty list: use empty-list-lit instead of empty-list-call"
    ]
