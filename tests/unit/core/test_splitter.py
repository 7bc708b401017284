from __future__ import annotations

"""
Unit tests for Path Decomposition.

Verifies root marker detection, component splitting and reconstruction.
"""

import os
from pathlib import Path

import pytest

from fsglob.core.splitter import UNIX_ROOT, join_components, split_path

pytestmark = pytest.mark.skipif(os.sep != "/", reason="unix path semantics")


def test_root_marker_is_slash_on_unix() -> None:
    assert UNIX_ROOT == "/"


def test_split_absolute_path() -> None:
    assert split_path("/a/b/c") == ("/", ["a", "b", "c"])


def test_split_relative_path() -> None:
    assert split_path("a/b") == (None, ["a", "b"])


def test_split_root_only() -> None:
    assert split_path("/") == ("/", [])


def test_split_single_component() -> None:
    assert split_path("*.txt") == (None, ["*.txt"])


def test_split_keeps_interior_empty_components() -> None:
    assert split_path("a//b") == (None, ["a", "", "b"])


def test_split_drops_trailing_separator() -> None:
    assert split_path("a/b/") == (None, ["a", "b"])


def test_split_does_not_normalize_dots() -> None:
    assert split_path("./a/../b") == (None, [".", "a", "..", "b"])


def test_split_empty_string() -> None:
    assert split_path("") == (None, [""])


def test_split_accepts_pathlike() -> None:
    assert split_path(Path("/tmp/x")) == ("/", ["tmp", "x"])


@pytest.mark.parametrize("path", ["/a/b/c", "a/b", "/", "x", "/a//b"])
def test_join_components_reconstructs_path(path: str) -> None:
    root, parts = split_path(path)
    assert join_components(root, parts) == path
