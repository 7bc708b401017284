from __future__ import annotations

"""
Simulated Working Directory.

The real process working directory is shared by every thread of the
interpreter, so changing it to run a single lookup is unsafe. This module
keeps a library-level stand-in: every path resolution in fsglob reads the
simulated directory instead of os.getcwd().

The value lives in a ContextVar, so overrides made through
working_directory() are visible only to the current thread or asyncio task
and are restored when the scope exits. Code that needs a different base for
a single call should pass cwd= explicitly instead.
"""

import contextvars
import logging
import os
from contextlib import contextmanager
from typing import Iterator, Optional

from fsglob.infra.fs import PathLike, absolute_path, join_path, to_path_str

logger = logging.getLogger(__name__)

# Resolved once at import time, like the process working directory itself.
_CWD: contextvars.ContextVar[str] = contextvars.ContextVar(
    "fsglob_cwd", default=absolute_path(".")
)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def get_cwd() -> str:
    """Return the simulated working directory of the current context."""
    return _CWD.get()


def resolve_path(path: PathLike, *more: PathLike, cwd: Optional[PathLike] = None) -> str:
    """
    Build an absolute path that honours the simulated working directory.

    A leading '.' is replaced by the working directory itself. The remaining
    segments are joined onto it, and a relative result is anchored at the
    working directory. Absolute inputs are returned untouched. No '.'/'..'
    normalization is performed.

    Args:
        path: First path segment.
        *more: Additional segments joined after 'path'.
        cwd: Explicit working directory for this call. Relative values are
             themselves resolved against the ambient one.

    Returns:
        str: Absolute path.
    """
    base = _base_dir(cwd)
    first = to_path_str(path)
    if first == ".":
        first = base

    joined = join_path(first, *more)
    if os.path.isabs(joined):
        return joined
    return join_path(base, joined)


@contextmanager
def working_directory(path: PathLike) -> Iterator[str]:
    """
    Temporarily rebind the simulated working directory.

    The new value is resolved against the current one, so nested relative
    overrides compose. The previous value is restored on exit, including
    when the body raises.

    Not safe for concurrent mutation from several threads sharing one
    context: only one writer may hold an override at a time.

    Args:
        path: Directory to use as the working directory inside the scope.

    Yields:
        str: The absolute directory now in effect.
    """
    new_cwd = resolve_path(path)
    token = _CWD.set(new_cwd)
    logger.debug(f"Working directory overridden: {new_cwd}")
    try:
        yield new_cwd
    finally:
        _CWD.reset(token)
        logger.debug(f"Working directory restored: {_CWD.get()}")

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _base_dir(cwd: Optional[PathLike]) -> str:
    """Pick the explicit working directory when given, else the ambient one."""
    ambient = _CWD.get()
    if cwd is None:
        return ambient
    return join_path(ambient, cwd)
