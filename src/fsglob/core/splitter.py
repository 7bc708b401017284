from __future__ import annotations

"""
Path Decomposition.

Splits path strings into an optional root marker and an ordered list of
components using the native separator. No '.' or '..' normalization is
performed here; that belongs to path resolution.
"""

import os
import re
from typing import List, Optional, Sequence, Tuple

from fsglob.infra.fs import PathLike, to_path_str

# -----------------------------------------------------------------------------
# PLATFORM CONSTANTS
# -----------------------------------------------------------------------------

SEPARATOR: str = os.sep

# The root of a unix system is '/'; platforms without a single-character root have none.
UNIX_ROOT: Optional[str] = SEPARATOR if SEPARATOR == "/" else None

# Backslash separators must be escaped before being used as a split expression.
_SEPARATOR_RX = re.compile(re.escape(SEPARATOR))

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def split_path(path: PathLike) -> Tuple[Optional[str], List[str]]:
    """
    Split a path into its root marker and components.

    Examples (unix):
        '/a/b/c' -> ('/', ['a', 'b', 'c'])
        'a/b'    -> (None, ['a', 'b'])
        '/'      -> ('/', [])

    Args:
        path: Path string or path-like object.

    Returns:
        Tuple[Optional[str], List[str]]: (root marker or None, components).
    """
    text = to_path_str(path)

    if text == UNIX_ROOT:
        return UNIX_ROOT, []

    if UNIX_ROOT and text.startswith(UNIX_ROOT):
        return UNIX_ROOT, _split_components(text[len(UNIX_ROOT):])

    return None, _split_components(text)


def join_components(root: Optional[str], components: Sequence[str]) -> str:
    """Rebuild a path string from a root marker and components."""
    return (root or "") + SEPARATOR.join(components)

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _split_components(text: str) -> List[str]:
    """
    Split on the separator keeping interior empty components.

    Trailing empty components are dropped ('a/b/' -> ['a', 'b']), while an
    empty input yields a single empty component.
    """
    if not text:
        return [""]

    parts = _SEPARATOR_RX.split(text)
    while parts and not parts[-1]:
        parts.pop()
    return parts
