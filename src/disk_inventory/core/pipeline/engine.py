from __future__ import annotations

"""
Core inventory pipeline.

This module coordinates one inventory run:
1. Validates the configuration.
2. Walks the root path and builds the tree.
3. Sorts every level by size, largest first.
4. Prunes entries below the size threshold.
5. Persists the JSON report when an output path is configured.
"""

import logging
from typing import Any, Dict, Optional

from disk_inventory.core.analysis.tree_builder import build_tree
from disk_inventory.core.analysis.tree_transforms import filter_tree, sort_tree_by_size
from disk_inventory.core.pipeline.validator import validate_config
from disk_inventory.core.reporting.json_writer import save_report
from disk_inventory.domain.errors import InventoryError
from disk_inventory.domain.report_models import (
    InventoryResult,
    create_error_result,
    create_success_result,
)

logger = logging.getLogger(__name__)


def run_inventory(config: Optional[Dict[str, Any]]) -> InventoryResult:
    """
    Execute the full inventory pipeline.

    Fatal failures (invalid layout, report serialization or write errors)
    are returned as a failed result carrying their ``ErrorKind``; no
    partial report is left on disk. Unreadable entries are skipped during
    the walk and never fail the run.

    Args:
        config: The configuration dictionary (raw or partial).

    Returns:
        InventoryResult: Object containing status, tree and summary.
    """
    logger.info("Inventory run started.")

    # -------------------------------------------------------------------------
    # 1) Config Normalization
    # -------------------------------------------------------------------------
    cfg, warnings = validate_config(config, strict=False)

    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    output_path = cfg["output_path"]

    try:
        # ---------------------------------------------------------------------
        # 2) Build
        # ---------------------------------------------------------------------
        root = build_tree(cfg["input_path"], depth=cfg["max_depth"], layout=cfg["layout"])
        nodes_built = sum(1 for _ in root.iter_nodes())
        total_size = root.size

        # ---------------------------------------------------------------------
        # 3) Sort, then 4) Filter
        # ---------------------------------------------------------------------
        sort_tree_by_size(root)
        filter_tree(root, cfg["min_size"])
        nodes_reported = sum(1 for _ in root.iter_nodes())

        logger.debug(
            f"Filter kept {nodes_reported} of {nodes_built} nodes "
            f"(min_size={cfg['min_size']})"
        )

        # ---------------------------------------------------------------------
        # 5) Persist
        # ---------------------------------------------------------------------
        if output_path:
            save_report(root, output_path)

    except InventoryError as e:
        logger.error(f"Inventory run failed ({e.kind.value}): {e.message}")
        return create_error_result(e.message, e.kind, cfg)

    summary = {
        "nodes_built": nodes_built,
        "nodes_reported": nodes_reported,
        "total_size": total_size,
        "report_written": bool(output_path),
    }

    logger.info("Inventory run completed successfully.")
    return create_success_result(cfg, root, output_path, summary)
