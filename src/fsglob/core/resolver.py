from __future__ import annotations

"""
Glob Resolution Service.

Splits a full pattern into its directory part and final glob component,
resolves the directory against the simulated working directory and filters
that directory's direct children through the compiled matcher. Only one
directory level is examined; wildcards in the directory part are taken
literally.
"""

import logging
from typing import List, Optional

from fsglob.core.compiler import compile_glob
from fsglob.core.splitter import join_components, split_path
from fsglob.domain.cwd import resolve_path
from fsglob.infra.fs import PathLike, list_children, to_path_str

logger = logging.getLogger(__name__)


# ==============================================================================
# PUBLIC API
# ==============================================================================

def glob(pattern: PathLike, *, cwd: Optional[PathLike] = None) -> List[str]:
    """
    Return the entries matching a full glob pattern.

    A pattern with a single component globs the working directory
    ('*.txt'); otherwise everything before the last component names the
    directory to list ('src/*.py', '/etc/*.conf').

    Args:
        pattern: Glob pattern, optionally prefixed by a directory.
        cwd: Explicit working directory for relative patterns.

    Returns:
        List[str]: Absolute paths of matching entries, in listing order.

    Raises:
        DirectoryNotFound: If the directory part does not resolve to a directory.
    """
    root, parts = split_path(pattern)

    if root is None and len(parts) == 1:
        directory = "."
        leaf = parts[0]
    else:
        directory = join_components(root, parts[:-1])
        leaf = parts[-1] if parts else ""

    return glob_in(directory, leaf, cwd=cwd)


def glob_in(root: PathLike, pattern: str, *, cwd: Optional[PathLike] = None) -> List[str]:
    """
    Return the direct children of 'root' whose base name matches 'pattern'.

    Args:
        root: Directory to list; relative values use the working directory.
        pattern: Glob for a single path component.
        cwd: Explicit working directory for a relative 'root'.

    Returns:
        List[str]: Absolute paths of matching entries, in listing order.

    Raises:
        DirectoryNotFound: If 'root' does not exist or is not a directory.
    """
    directory = resolve_path(root, cwd=cwd)
    matcher = compile_glob(to_path_str(pattern))
    logger.debug(f"Globbing '{directory}' with {matcher.regex.pattern!r}")

    matches = [path for name, path in list_children(directory) if matcher.matches(name)]

    logger.debug(f"Glob '{pattern}' matched {len(matches)} entries in '{directory}'")
    return matches
