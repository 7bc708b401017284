from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides the primitives the glob resolver consumes: path-like coercion,
path joining, canonical absolute resolution and single-level directory
listing. Acts as an abstraction over the 'os' module so that the rest of
the package never touches the filesystem directly.
"""

import os
from typing import List, Tuple, Union

from fsglob.domain.errors import DirectoryNotFound

PathLike = Union[str, "os.PathLike[str]"]

# -----------------------------------------------------------------------------
# PATH COERCION API
# -----------------------------------------------------------------------------

def to_path_str(value: PathLike) -> str:
    """
    Convert any accepted path-like input into its string form.

    Args:
        value: A string or an object implementing os.PathLike (e.g. pathlib.Path).

    Returns:
        str: The path as a native string.

    Raises:
        TypeError: If the value is neither a string nor path-like.
    """
    if isinstance(value, str):
        return value
    path = os.fspath(value)
    if isinstance(path, bytes):
        raise TypeError(f"Byte paths are not supported: {value!r}")
    return path


def join_path(base: PathLike, *parts: PathLike) -> str:
    """Join path segments using the native separator."""
    return os.path.join(to_path_str(base), *(to_path_str(p) for p in parts))


def absolute_path(path: PathLike) -> str:
    """
    Resolve a path into its canonical absolute form.

    '.' resolves to the real process working directory; symbolic links in
    the path are resolved.

    Args:
        path: Raw path input.

    Returns:
        str: Canonical absolute path.
    """
    return os.path.realpath(to_path_str(path))

# -----------------------------------------------------------------------------
# DIRECTORY LISTING API
# -----------------------------------------------------------------------------

def list_children(directory: PathLike) -> List[Tuple[str, str]]:
    """
    List the direct children of a directory (one level, non-recursive).

    Entries are returned in the order the operating system yields them.

    Args:
        directory: Directory to list.

    Returns:
        List[Tuple[str, str]]: (base name, full path) pairs.

    Raises:
        DirectoryNotFound: If the directory does not exist or is not a directory.
    """
    path = to_path_str(directory)
    if not os.path.isdir(path):
        raise DirectoryNotFound(path)

    with os.scandir(path) as it:
        return [(entry.name, entry.path) for entry in it]
