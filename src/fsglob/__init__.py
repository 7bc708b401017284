from __future__ import annotations

"""
fsglob: shell-style glob matching over a simulated working directory.
"""

from fsglob.core.compiler import GlobMatcher, compile_glob, glob_to_regex
from fsglob.core.resolver import glob, glob_in
from fsglob.core.splitter import UNIX_ROOT, split_path
from fsglob.domain.cwd import get_cwd, resolve_path, working_directory
from fsglob.domain.errors import DirectoryNotFound, FsGlobError

__version__ = "0.1.0"

__all__ = [
    "GlobMatcher",
    "compile_glob",
    "glob_to_regex",
    "glob",
    "glob_in",
    "split_path",
    "UNIX_ROOT",
    "get_cwd",
    "resolve_path",
    "working_directory",
    "DirectoryNotFound",
    "FsGlobError",
]
