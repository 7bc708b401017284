from __future__ import annotations

"""
Logging Configuration Models.

Holds the knobs the CLI can turn (verbosity and an optional log file) and
the fixed record formats. Console output goes to stderr only, since stdout
carries the match list.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

# Mapping of string identifiers to native logging constants
LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

CONSOLE_FORMAT = "%(levelname)s | %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
FALLBACK_FORMAT = "FALLBACK | %(levelname)s | %(message)s"


@dataclass(frozen=True)
class LoggingConfig:
    """
    Immutable specification for the logging subsystem initialization.

    Attributes:
        level: Minimum severity level to capture.
        console: Flag to enable stderr stream output.
        log_file: Optional path of a rotating log file.
        max_bytes: Size of a log segment before rotation.
        backup_count: Number of rotated segments to keep.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None
    max_bytes: int = 1024 * 1024
    backup_count: int = 2

    @classmethod
    def from_settings(cls, settings: Dict[str, object]) -> "LoggingConfig":
        """Build the config from a validated fsglob settings dictionary."""
        return cls(
            level=str(settings.get("log_level") or "INFO"),
            console=True,
            log_file=str(settings.get("log_file") or "") or None,
        )
