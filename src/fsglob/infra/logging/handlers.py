from __future__ import annotations

"""
Logging Handlers and Low-Level Utilities.

Provides the handler factories used by the logging core and the tagging
mechanism that lets fsglob tell its own handlers apart from handlers
installed by the host application or by test runners.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

# Internal attribute used to tag and identify our own handlers
HANDLER_TAG_ATTR: str = "_fsglob_handler"


# ==============================================================================
# HANDLER TAGGING
# ==============================================================================

def tag_handler(handler: logging.Handler) -> logging.Handler:
    """Mark a handler as managed by fsglob and return it."""
    setattr(handler, HANDLER_TAG_ATTR, True)
    return handler


def is_our_handler(handler: logging.Handler) -> bool:
    """Return True if the handler carries the fsglob tag."""
    return bool(getattr(handler, HANDLER_TAG_ATTR, False))


# ==============================================================================
# HANDLER FACTORIES
# ==============================================================================

def create_console_handler(level_int: int, formatter: logging.Formatter) -> logging.Handler:
    """
    Build a stderr handler so that stdout stays reserved for match output.

    Args:
        level_int: Numeric logging level.
        formatter: Pre-configured logging formatter.

    Returns:
        logging.Handler: Tagged stream handler.
    """
    sh = logging.StreamHandler(sys.stderr)
    sh.setLevel(level_int)
    sh.setFormatter(formatter)
    return tag_handler(sh)


def create_rotating_file_handler(
        log_file: str,
        level_int: int,
        formatter: logging.Formatter,
        max_bytes: int,
        backup_count: int,
) -> Optional[RotatingFileHandler]:
    """
    Initialize a RotatingFileHandler, creating the parent directory if needed.

    Args:
        log_file: Target path for the log file.
        level_int: Numeric logging level.
        formatter: Pre-configured logging formatter.
        max_bytes: Rollover threshold in bytes.
        backup_count: Number of archived files to keep.

    Returns:
        Optional[RotatingFileHandler]: Configured handler or None if I/O fails.
    """
    try:
        _ensure_parent_dir(log_file)
        fh = RotatingFileHandler(
            log_file,
            maxBytes=int(max_bytes),
            backupCount=int(backup_count),
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"WARNING: Cannot open log file '{log_file}': {e}\n")
        return None

    fh.setLevel(level_int)
    fh.setFormatter(formatter)
    tag_handler(fh)
    return fh


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _ensure_parent_dir(path: str) -> None:
    """Create the parent directory hierarchy for a target file."""
    parent = os.path.dirname(os.path.abspath(path))
    if parent and not os.path.exists(parent):
        os.makedirs(parent, exist_ok=True)
