from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, merging of defaults and
command-line overrides, pipeline execution and result rendering.
"""

import os
import sys
from typing import Any, Dict, List, Optional

from disk_inventory.core.pipeline.engine import run_inventory
from disk_inventory.core.pipeline.validator import validate_config
from disk_inventory.core.reporting.console_renderer import render_tree
from disk_inventory.domain.config import get_default_config
from disk_inventory.domain.report_models import InventoryResult
from disk_inventory.infra.logging import LoggingConfig, configure_logging, get_logger, shutdown_logging
from disk_inventory.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Argument errors are reported by argparse itself, which exits with
    status 2 before anything is scanned.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 for success, non-zero for failure).
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (stderr, optional rotating file)
    log_level = "DEBUG" if args.debug else "WARNING"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file), force=True)

    try:
        # 3. Configuration merge and validation
        overrides = cli_args.args_to_overrides(args)
        raw_conf = _merge_config(get_default_config(), overrides)
        clean_conf, warnings = validate_config(raw_conf, strict=False)

        for w in warnings:
            logger.warning(f"Configuration Constraint: {w}")

        logger.debug(f"Resolved configuration: {clean_conf}")

        # 4. Pipeline execution and 5. output rendering
        try:
            result = run_inventory(clean_conf)
            return _render_result(result)
        except KeyboardInterrupt:
            logger.warning("Scan interrupted by user.")
            print("Interrupted.", file=sys.stderr)
            return EXIT_INTERRUPTED
        except BrokenPipeError:
            # Reader went away (e.g. `| head`); later flushes must not fail again
            logger.debug("stdout closed by the reader.")
            _silence_stdout()
            return EXIT_FAILURE
    finally:
        shutdown_logging()

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge known override keys into the base configuration.

    ``None`` overrides leave the base value in place.
    """
    out = dict(base)
    keys_to_merge = ["input_path", "max_depth", "min_size", "output_path", "layout"]
    for k in keys_to_merge:
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def _render_result(result: InventoryResult) -> int:
    """
    Print the outcome of a run and map it to an exit code.

    Args:
        result: The inventory result to render.

    Returns:
        int: Exit code for the run.
    """
    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return EXIT_FAILURE

    if result.output_path:
        print(f"Report saved to {result.output_path}")
    elif result.root is not None:
        print("\n".join(render_tree(result.root)))

    return EXIT_OK


def _silence_stdout() -> None:
    """Point the stdout descriptor at devnull so the exit-time flush succeeds."""
    try:
        fd = sys.stdout.fileno()
    except (OSError, ValueError):
        # Captured or replaced stdout has no descriptor
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    try:
        os.dup2(devnull, fd)
    finally:
        os.close(devnull)


if __name__ == "__main__":
    sys.exit(main())
