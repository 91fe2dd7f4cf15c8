from __future__ import annotations

"""
Inventory Result Models.

Defines the result object and factory functions used to hand the outcome of
an inventory run from the pipeline engine to the CLI layer.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from disk_inventory.domain.config import DEFAULT_MIN_SIZE, LAYOUT_FLAT
from disk_inventory.domain.errors import ErrorKind
from disk_inventory.domain.tree_models import FileNode

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class InventoryResult:
    """
    Unified result of a complete inventory run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        error_kind: Category of the failure, ``None`` on success.
        input_path: Root path that was analyzed, as given.
        max_depth: Traversal bound used (``None`` means unbounded).
        min_size: Size threshold applied by the filter stage.
        layout: Tree layout ("flat" or "nested").
        root: Final tree, ``None`` when the run failed.
        output_path: Path of the written JSON report, if any.
        summary: Execution statistics.
    """
    ok: bool
    error: str

    input_path: str
    max_depth: Optional[int]
    min_size: int
    layout: str

    error_kind: Optional[ErrorKind] = None
    root: Optional[FileNode] = None
    output_path: Optional[str] = None

    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        kind: ErrorKind,
        cfg: Dict[str, Any],
        summary_extra: Optional[Dict[str, Any]] = None
) -> InventoryResult:
    """
    Create a failed inventory result.

    Args:
        error: Detailed error description.
        kind: Failure category.
        cfg: The configuration used during the failed run.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        InventoryResult: An immutable error result object.
    """
    return InventoryResult(
        ok=False,
        error=error,
        error_kind=kind,
        input_path=cfg.get("input_path", ""),
        max_depth=cfg.get("max_depth"),
        min_size=cfg.get("min_size", DEFAULT_MIN_SIZE),
        layout=cfg.get("layout", LAYOUT_FLAT),
        output_path=None,
        summary=summary_extra or {},
    )


def create_success_result(
        cfg: Dict[str, Any],
        root: FileNode,
        output_path: Optional[str] = None,
        summary_extra: Optional[Dict[str, Any]] = None
) -> InventoryResult:
    """
    Create a successful inventory result.

    Args:
        cfg: Final configuration used during execution.
        root: The filtered and sorted tree.
        output_path: Path of the written report, if one was requested.
        summary_extra: Final execution metrics.

    Returns:
        InventoryResult: An immutable success result object.
    """
    return InventoryResult(
        ok=True,
        error="",
        input_path=cfg.get("input_path", ""),
        max_depth=cfg.get("max_depth"),
        min_size=cfg.get("min_size", DEFAULT_MIN_SIZE),
        layout=cfg.get("layout", LAYOUT_FLAT),
        root=root,
        output_path=output_path,
        summary=summary_extra or {},
    )
