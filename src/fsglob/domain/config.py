from __future__ import annotations

"""
Configuration Domain Defaults.

Describes the runtime configuration consumed by the CLI. The configuration
is a plain dictionary assembled from these defaults and command-line
overrides; nothing is persisted between runs.
"""

from typing import Any, Dict

from fsglob.domain.cwd import get_cwd

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
DEFAULT_LOG_LEVEL = "INFO"

CONFIG_KEYS = (
    "cwd",
    "sort_results",
    "json_output",
    "log_level",
    "log_file",
)


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Resolution
        "cwd": get_cwd(),

        # Output
        "sort_results": False,
        "json_output": False,

        # Diagnostics
        "log_level": DEFAULT_LOG_LEVEL,
        "log_file": "",
    }
