from __future__ import annotations

"""
Glob to Regex Compiler.

Translates shell-style glob patterns into anchored regular expressions that
are matched against single file names. Supported syntax:

    *        any run of characters except the separator
    ?        exactly one character except the separator
    {a,b}    alternation, nestable
    \\x       the character x, literally

Names starting with '.' are only matched when the pattern itself starts
with '.', mirroring common shell behaviour. Unbalanced braces are tolerated
and never raise.
"""

import os
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import List

# -----------------------------------------------------------------------------
# REGEX FRAGMENTS
# -----------------------------------------------------------------------------

_SEP_RX: str = re.escape(os.sep)
_NO_LEADING_DOT: str = r"(?!\.)"
_ANY_RUN: str = f"[^{_SEP_RX}]*"
_ANY_ONE: str = f"[^{_SEP_RX}]"

# Characters meaningful to the regex engine that must match themselves.
_SPECIAL_CHARS = frozenset(".()|+^$@%")

# -----------------------------------------------------------------------------
# MATCHER MODEL
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class GlobMatcher:
    """
    Compiled, anchored predicate over single file names.

    Attributes:
        glob: Source glob pattern.
        regex: Compiled regular expression equivalent to the glob.
    """
    glob: str
    regex: re.Pattern

    def matches(self, name: str) -> bool:
        """Return True if the whole name satisfies the glob."""
        return self.regex.match(name) is not None

    def __call__(self, name: str) -> bool:
        return self.matches(name)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

@lru_cache(maxsize=256)
def compile_glob(pattern: str) -> GlobMatcher:
    """
    Compile a glob pattern into a GlobMatcher.

    Args:
        pattern: Shell-style glob for a single path component.

    Returns:
        GlobMatcher: The anchored matcher.
    """
    return GlobMatcher(glob=pattern, regex=re.compile(glob_to_regex(pattern)))


def glob_to_regex(pattern: str) -> str:
    """
    Translate a glob pattern into an anchored regular expression string.

    Single left-to-right pass keeping the emitted fragments, the brace
    nesting depth, and the number of groups currently open.

    Args:
        pattern: Shell-style glob.

    Returns:
        str: Regular expression source anchored at both ends.
    """
    fragments: List[str] = []
    curly_depth = 0
    open_groups = 0

    i = 0
    n = len(pattern)
    while i < n:
        c = pattern[i]
        nxt = pattern[i + 1] if i + 1 < n else None

        if c == "\\":
            # Escaped character is taken literally; a dangling backslash matches itself.
            fragments.append(re.escape(nxt) if nxt is not None else r"\\")
            i += 2
            continue

        if c == os.sep:
            fragments.append(_SEP_RX if nxt == "." else _SEP_RX + _NO_LEADING_DOT)
        elif c == "*":
            fragments.append(_ANY_RUN)
        elif c == "?":
            fragments.append(_ANY_ONE)
        elif c == "{":
            fragments.append("(")
            curly_depth += 1
            open_groups += 1
        elif c == "}":
            curly_depth -= 1
            if open_groups > 0:
                fragments.append(")")
                open_groups -= 1
            else:
                fragments.append(r"\}")
        elif c == "," and curly_depth > 0:
            fragments.append("|")
        elif c in _SPECIAL_CHARS:
            fragments.append("\\" + c)
        else:
            fragments.append(c)
        i += 1

    # Groups left open by an unterminated '{' are closed at the end.
    fragments.append(")" * open_groups)

    anchor = "" if pattern.startswith(".") else _NO_LEADING_DOT
    return "^" + anchor + "".join(fragments) + r"\Z"
