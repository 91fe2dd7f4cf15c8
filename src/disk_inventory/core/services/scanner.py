from __future__ import annotations

"""
Filesystem Walk Service.

Traverses a directory tree depth-first and yields one ``WalkEntry`` per
entry whose metadata could be read. Unreadable entries and unlistable
directories are skipped silently so that a single permission problem
never aborts a scan.
"""

import logging
import os
from typing import Iterator, List, Optional, Tuple

from disk_inventory.domain.errors import MetadataError
from disk_inventory.domain.tree_models import WalkEntry
from disk_inventory.infra.fs import entry_name, list_directory, read_entry_metadata

logger = logging.getLogger(__name__)


# ==============================================================================
# PUBLIC API
# ==============================================================================

def yield_entries(root_path: str, max_depth: Optional[int] = None) -> Iterator[WalkEntry]:
    """
    Walk ``root_path`` and yield every visited entry in pre-order.

    The root itself is yielded first (depth 0), followed by its contents.
    Siblings are visited in name order. Entries deeper than ``max_depth``
    are never touched: they are neither stat-ed nor listed.

    Args:
        root_path: Directory (or file) to start from.
        max_depth: Maximum depth below the root, ``None`` for unbounded.

    Yields:
        WalkEntry: One record per entry whose metadata was read.
    """
    # (path, name, depth, parent)
    stack: List[Tuple[str, str, int, Optional[str]]] = [
        (root_path, entry_name(root_path), 0, None)
    ]

    while stack:
        path, name, depth, parent = stack.pop()

        try:
            # The walk root is resolved through symlinks, everything below is not
            size, is_dir = read_entry_metadata(path, follow_symlinks=(depth == 0))
        except MetadataError as e:
            logger.debug(f"Skipping entry: {e}")
            continue

        yield WalkEntry(
            path=path,
            name=name,
            size=size,
            depth=depth,
            is_dir=is_dir,
            parent=parent,
        )

        if not is_dir:
            continue
        if max_depth is not None and depth >= max_depth:
            continue

        try:
            child_names = list_directory(path)
        except MetadataError as e:
            logger.debug(f"Skipping directory contents: {e}")
            continue

        # Reverse push keeps name order when popping
        for child_name in reversed(child_names):
            stack.append((os.path.join(path, child_name), child_name, depth + 1, path))
