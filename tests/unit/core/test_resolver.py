from __future__ import annotations

"""
Unit tests for the Glob Resolution Service.

Verifies pattern decomposition into directory and leaf, filtering of
directory entries, and propagation of missing-directory failures.
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from fsglob.core.resolver import glob, glob_in
from fsglob.domain.cwd import working_directory
from fsglob.domain.errors import DirectoryNotFound


def _names(paths):
    return sorted(os.path.basename(p) for p in paths)


# -----------------------------------------------------------------------------
# 1. Filtering
# -----------------------------------------------------------------------------
def test_txt_pattern_lists_only_txt_files(sample_dir: Path) -> None:
    assert _names(glob_in(sample_dir, "*.txt")) == ["readme.txt"]


def test_star_skips_dotfiles(sample_dir: Path) -> None:
    assert _names(glob_in(sample_dir, "*")) == ["notes.md", "readme.txt", "sub"]


def test_dot_star_lists_dotfiles(sample_dir: Path) -> None:
    assert ".hidden" in _names(glob_in(sample_dir, ".*"))


def test_results_are_absolute_paths(sample_dir: Path) -> None:
    for path in glob_in(sample_dir, "*"):
        assert os.path.isabs(path)
        assert os.path.dirname(path) == str(sample_dir)


def test_no_match_returns_empty_list(sample_dir: Path) -> None:
    assert glob_in(sample_dir, "*.png") == []


def test_listing_order_is_preserved(sample_dir: Path) -> None:
    listing = [
        ("b.txt", str(sample_dir / "b.txt")),
        ("a.txt", str(sample_dir / "a.txt")),
        ("c.md", str(sample_dir / "c.md")),
    ]
    with patch("fsglob.core.resolver.list_children", return_value=listing):
        found = glob_in(sample_dir, "*.txt")

    assert found == [str(sample_dir / "b.txt"), str(sample_dir / "a.txt")]


# -----------------------------------------------------------------------------
# 2. Pattern Decomposition
# -----------------------------------------------------------------------------
def test_single_component_pattern_uses_working_directory(sample_dir: Path) -> None:
    with working_directory(sample_dir):
        assert _names(glob("*.md")) == ["notes.md"]


def test_explicit_cwd_argument(sample_dir: Path) -> None:
    assert _names(glob("*.md", cwd=sample_dir)) == ["notes.md"]


def test_relative_directory_part(sample_dir: Path) -> None:
    found = glob("sub/*.txt", cwd=sample_dir)
    assert found == [str(sample_dir / "sub" / "inner.txt")]


def test_absolute_pattern_ignores_working_directory(sample_dir: Path, tmp_path: Path) -> None:
    other = tmp_path / "elsewhere"
    other.mkdir()
    with working_directory(other):
        found = glob(str(sample_dir / "*.txt"))

    assert found == [str(sample_dir / "readme.txt")]


@pytest.mark.skipif(os.sep != "/", reason="unix root")
def test_root_pattern_lists_filesystem_root() -> None:
    found = glob("/*")
    assert all(os.path.dirname(p) == "/" for p in found)


def test_braces_in_leaf(sample_dir: Path) -> None:
    assert _names(glob("{readme,notes}.*", cwd=sample_dir)) == ["notes.md", "readme.txt"]


# -----------------------------------------------------------------------------
# 3. Failures
# -----------------------------------------------------------------------------
def test_missing_directory_raises(tmp_path: Path) -> None:
    missing = tmp_path / "nonexistent-dir"

    with pytest.raises(DirectoryNotFound) as exc_info:
        glob(str(missing / "*"))

    assert exc_info.value.path == str(missing)


def test_file_as_directory_raises(sample_dir: Path) -> None:
    with pytest.raises(DirectoryNotFound):
        glob("readme.txt/*", cwd=sample_dir)


def test_directory_not_found_is_a_file_not_found_error(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        glob_in(tmp_path / "missing", "*")
