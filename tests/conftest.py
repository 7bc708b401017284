from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared directory fixtures used by resolver and CLI tests.
"""

import logging
import os
import sys
from pathlib import Path

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from fsglob.infra.logging import shutdown_logging  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def sample_dir(tmp_path: Path) -> Path:
    """
    Create a directory with a mix of visible files, a dotfile and a subdirectory.

    Structure:
    /sample
      readme.txt
      notes.md
      .hidden
      /sub
        inner.txt
    """
    root = tmp_path / "sample"
    root.mkdir()
    (root / "readme.txt").write_text("read me", encoding="utf-8")
    (root / "notes.md").write_text("# notes", encoding="utf-8")
    (root / ".hidden").write_text("secret", encoding="utf-8")
    (root / "sub").mkdir()
    (root / "sub" / "inner.txt").write_text("inner", encoding="utf-8")
    return root


@pytest.fixture(autouse=True)
def reset_logging():
    """Detach fsglob handlers from the root logger around each test."""
    shutdown_logging()
    yield
    shutdown_logging()
    logging.getLogger().setLevel(logging.WARNING)
