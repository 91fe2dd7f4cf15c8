from __future__ import annotations

"""
Disk Tree Builder.

Turns the stream of walked entries into a ``FileNode`` tree. Two layouts
are supported:

- flat: every entry, whatever its depth, becomes a direct child of the
  root (the root's own self-entry included). This is the default report
  shape.
- nested: every entry is attached under its real parent directory and
  directory sizes are computed bottom-up.

In both layouts the root's size is the total of every visited entry.
"""

import logging
from typing import Dict, List, Optional

from disk_inventory.core.services.scanner import yield_entries
from disk_inventory.domain.config import LAYOUT_FLAT, LAYOUT_NESTED, LAYOUTS
from disk_inventory.domain.errors import ConfigError
from disk_inventory.domain.tree_models import FileNode, WalkEntry
from disk_inventory.infra.fs import display_path

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_tree(path: str, depth: Optional[int] = None, layout: str = LAYOUT_FLAT) -> FileNode:
    """
    Walk ``path`` down to ``depth`` levels and build the inventory tree.

    Args:
        path: Root path to analyze. Used verbatim as the root node name.
        depth: Maximum traversal depth, ``None`` for unbounded.
        layout: "flat" or "nested".

    Returns:
        FileNode: The root node of the tree.

    Raises:
        ConfigError: If the layout is unknown.
    """
    if layout not in LAYOUTS:
        raise ConfigError(f"Unknown tree layout '{layout}'. Expected one of: {', '.join(LAYOUTS)}")

    logger.info(f"Building {layout} tree for: {path} (depth={'unbounded' if depth is None else depth})")

    root = FileNode(name=display_path(path), size=0, location=None)
    entries = yield_entries(path, max_depth=depth)

    if layout == LAYOUT_NESTED:
        _build_nested(root, entries)
    else:
        _build_flat(root, entries)

    logger.debug(f"Tree built: total size {root.size} bytes")
    return root

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _to_node(entry: WalkEntry) -> FileNode:
    return FileNode(
        name=display_path(entry.name),
        size=entry.size,
        location=display_path(entry.path),
    )


def _build_flat(root: FileNode, entries) -> None:
    for entry in entries:
        root.size += entry.size
        root.children.append(_to_node(entry))


def _build_nested(root: FileNode, entries) -> None:
    """
    Attach each entry under its parent and aggregate sizes bottom-up.

    The walk root is represented by ``root`` itself rather than by a child.
    """
    nodes: Dict[str, FileNode] = {}
    # Pre-order: parents always precede their children
    order: List[WalkEntry] = []

    for entry in entries:
        if entry.parent is None:
            node = root
            node.size = entry.size
        else:
            node = _to_node(entry)
            parent = nodes.get(entry.parent)
            if parent is None:
                continue
            parent.children.append(node)
        nodes[entry.path] = node
        order.append(entry)

    # Reverse pre-order visits children before their parents
    for entry in reversed(order):
        if entry.parent is None:
            continue
        nodes[entry.parent].size += nodes[entry.path].size
