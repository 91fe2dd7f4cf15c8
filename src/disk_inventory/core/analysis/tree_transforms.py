from __future__ import annotations

"""
In-place Tree Transformations.

Size-based pruning and ordering of an inventory tree. Neither stage
recomputes sizes: a node keeps the size it was built with even after
some of its children are removed.
"""

from disk_inventory.domain.config import DEFAULT_MIN_SIZE
from disk_inventory.domain.tree_models import FileNode


def filter_tree(node: FileNode, min_size: int = DEFAULT_MIN_SIZE) -> None:
    """
    Recursively remove children smaller than ``min_size`` bytes.

    The node passed in is never removed itself, only its descendants.

    Args:
        node: Subtree root to prune.
        min_size: Inclusive lower bound; children with ``size < min_size`` go.
    """
    node.children[:] = [child for child in node.children if child.size >= min_size]
    for child in node.children:
        filter_tree(child, min_size)


def sort_tree_by_size(node: FileNode) -> None:
    """
    Recursively order children by size, largest first.

    The sort is stable, so equally sized children keep their walk order.
    """
    node.children.sort(key=lambda child: child.size, reverse=True)
    for child in node.children:
        sort_tree_by_size(child)
