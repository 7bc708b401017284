from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: argument parsing, configuration merging and
validation, logging bootstrap, glob resolution and result rendering.
"""

import json
import re
import sys
from typing import Any, Dict, List, Optional

from fsglob.core.resolver import glob
from fsglob.core.validator import validate_config
from fsglob.domain.config import CONFIG_KEYS, get_default_config
from fsglob.domain.errors import DirectoryNotFound
from fsglob.infra.logging import LoggingConfig, configure_logging, get_logger
from fsglob.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: 0 on success, 2 when the pattern is malformed or its directory
             cannot be listed, 1 on any other failure.
    """
    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Configuration merge and validation
    overrides = cli_args.args_to_overrides(args)
    clean_conf, warnings = validate_config(_merge_config(get_default_config(), overrides))

    # 3. Logging bootstrap (console on stderr, optional rotating file)
    configure_logging(LoggingConfig.from_settings(clean_conf))

    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    logger.debug(f"Resolving '{args.pattern}' from {clean_conf['cwd']}")

    # 4. Resolution phase
    try:
        matches = glob(args.pattern, cwd=clean_conf["cwd"])
    except DirectoryNotFound as e:
        logger.error(str(e))
        print(f"ERROR: {e}", file=sys.stderr)
        return 2
    except re.error as e:
        msg = f"Invalid glob pattern '{args.pattern}': {e}"
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 2
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        return 130
    except Exception as e:
        logger.critical(f"Glob resolution failed: {e}", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    if clean_conf["sort_results"]:
        matches = sorted(matches)

    # 5. Output rendering phase
    if clean_conf["json_output"]:
        print(json.dumps(matches, ensure_ascii=False, indent=2))
    else:
        _print_matches(matches)

    return 0

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge known, non-None override values into the base configuration.

    Args:
        base: The primary configuration dictionary.
        overrides: New values to inject.

    Returns:
        Dict[str, Any]: The merged configuration state.
    """
    out = dict(base)
    for k in CONFIG_KEYS:
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def _print_matches(matches: List[str]) -> None:
    """Print one path per line."""
    for path in matches:
        print(path)


if __name__ == "__main__":
    sys.exit(main())
