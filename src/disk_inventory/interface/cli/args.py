from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema (flags, types, defaults) and translates
the parsed namespace into configuration overrides for the pipeline.
"""

import argparse
from typing import Any, Dict

from disk_inventory import __app_name__, __version__
from disk_inventory.domain.config import DEFAULT_INPUT_PATH, DEFAULT_MIN_SIZE, LAYOUT_FLAT, LAYOUT_NESTED

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the disk-inventory CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog=__app_name__,
        description="Analyze disk usage",
    )

    # --- Scan Target ---
    p.add_argument(
        "-p", "--path",
        dest="path",
        metavar="PATH",
        default=DEFAULT_INPUT_PATH,
        help="Path to analyze (default: %(default)s).",
    )
    p.add_argument(
        "-d", "--depth",
        dest="depth",
        metavar="DEPTH",
        type=non_negative_int,
        default=None,
        help="Depth for directory traversal (default: unbounded).",
    )
    p.add_argument(
        "--nested",
        action="store_true",
        help="Attach entries under their real parent directories instead of a flat list.",
    )

    # --- Filtering ---
    p.add_argument(
        "-s", "--size",
        dest="size",
        metavar="SIZE",
        type=non_negative_int,
        default=None,
        help=f"Minimum file size in bytes to include in the report (default: {DEFAULT_MIN_SIZE}).",
    )

    # --- Output ---
    p.add_argument(
        "-o", "--output",
        dest="output",
        metavar="OUTPUT",
        default=None,
        help="Output report to a JSON file instead of the console.",
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
        metavar="FILE",
        default=None,
        help="Also write log records to a rotating log file.",
    )
    p.add_argument(
        "-V", "--version",
        action="version",
        version=f"{__app_name__} {__version__}",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["input_path"] = args.path
    overrides["max_depth"] = args.depth
    overrides["min_size"] = args.size
    overrides["output_path"] = args.output
    overrides["layout"] = LAYOUT_NESTED if args.nested else LAYOUT_FLAT

    return overrides

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def non_negative_int(value: str) -> int:
    """
    argparse type for depth and size flags.

    Raises:
        argparse.ArgumentTypeError: If the value is not a whole number >= 0.
    """
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid non-negative integer value: '{value}'")
    if number < 0:
        raise argparse.ArgumentTypeError(f"value must be >= 0, got {number}")
    return number
