from __future__ import annotations

"""
Unit tests for the CLI Application Controller.

Runs main() in-process and inspects stdout, stderr and exit codes.
"""

import json
import os
from pathlib import Path
from unittest.mock import patch

import pytest

from fsglob.infra.logging import shutdown_logging
from fsglob.interface.cli.app import _merge_config, main


@pytest.fixture(autouse=True)
def flush_logs(capsys):
    """Drain the log queue while the captured stderr is still open."""
    yield
    shutdown_logging()


def test_prints_one_match_per_line(sample_dir: Path, capsys) -> None:
    code = main(["*.txt", "--cwd", str(sample_dir)])

    out = capsys.readouterr().out
    assert code == 0
    assert out.splitlines() == [str(sample_dir / "readme.txt")]


def test_sorted_output(sample_dir: Path, capsys) -> None:
    code = main(["*", "--cwd", str(sample_dir), "--sort"])

    lines = capsys.readouterr().out.splitlines()
    assert code == 0
    assert lines == sorted(lines)
    assert [os.path.basename(p) for p in lines] == ["notes.md", "readme.txt", "sub"]


def test_json_output(sample_dir: Path, capsys) -> None:
    code = main([".*", "--cwd", str(sample_dir), "--json"])

    payload = json.loads(capsys.readouterr().out)
    assert code == 0
    assert str(sample_dir / ".hidden") in payload


def test_no_matches_is_success(sample_dir: Path, capsys) -> None:
    code = main(["*.png", "--cwd", str(sample_dir)])

    assert code == 0
    assert capsys.readouterr().out == ""


def test_missing_directory_exit_code(tmp_path: Path, capsys) -> None:
    code = main([str(tmp_path / "nonexistent-dir" / "*")])

    captured = capsys.readouterr()
    assert code == 2
    assert captured.out == ""
    assert "nonexistent-dir" in captured.err


def test_unexpected_failure_exit_code(sample_dir: Path, capsys) -> None:
    with patch("fsglob.interface.cli.app.glob", side_effect=PermissionError("denied")):
        code = main(["*", "--cwd", str(sample_dir)])

    assert code == 1
    assert "denied" in capsys.readouterr().err


def test_merge_config_ignores_none_and_unknown_keys() -> None:
    base = {"cwd": "/base", "sort_results": False}
    merged = _merge_config(base, {"cwd": None, "sort_results": True, "bogus": 1})

    assert merged == {"cwd": "/base", "sort_results": True}


def test_malformed_bracket_pattern_exit_code(sample_dir: Path, capsys) -> None:
    code = main(["file[1", "--cwd", str(sample_dir)])

    captured = capsys.readouterr()
    assert code == 2
    assert captured.out == ""
    assert "Invalid glob pattern 'file[1'" in captured.err
