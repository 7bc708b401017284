from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates the parsed
argparse namespace into configuration overrides.
"""

import argparse
from typing import Any, Dict

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the fsglob CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="fsglob",
        description="List the entries of one directory matching a shell-style glob.",
    )

    p.add_argument(
        "pattern",
        help="Glob pattern, e.g. '*.txt', 'src/{a,b}*.py' or '/etc/*.conf'.",
    )

    # --- Resolution ---
    p.add_argument(
        "--cwd",
        dest="cwd",
        default=None,
        help="Directory that relative patterns are resolved against.",
    )

    # --- Output ---
    p.add_argument(
        "--sort",
        dest="sort_results",
        action="store_true",
        help="Sort matches instead of printing them in listing order.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print matches as a JSON array.",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write diagnostics to this rotating log file.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Flags left unset map to None (or are omitted) so they never mask defaults.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["cwd"] = args.cwd
    overrides["log_file"] = args.log_file

    if args.sort_results:
        overrides["sort_results"] = True
    if args.json_output:
        overrides["json_output"] = True
    if args.debug:
        overrides["log_level"] = "DEBUG"

    return overrides
