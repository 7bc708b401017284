from __future__ import annotations

"""
Glob Domain Errors.

Defines the exception hierarchy raised by the glob subsystem. Malformed
patterns are tolerated by the compiler, so the only failure modelled here
is a pattern whose directory part does not resolve to a listable directory.
"""


class FsGlobError(Exception):
    """Base class for every error raised by fsglob."""


class DirectoryNotFound(FsGlobError, FileNotFoundError):
    """
    Raised when the root directory of a pattern does not exist or is not a directory.

    Subclasses FileNotFoundError so callers handling plain OS errors keep working.

    Attributes:
        path: Absolute path of the directory that could not be listed.
    """

    def __init__(self, path: str):
        super().__init__(f"Directory not found or not listable: '{path}'")
        self.path = path

    def __str__(self) -> str:
        return self.args[0]
