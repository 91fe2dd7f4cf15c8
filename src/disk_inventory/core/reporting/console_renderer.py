from __future__ import annotations

"""
Console Tree Renderer.

Converts an inventory tree into readable text lines for the terminal,
using the usual ASCII connectors (├──, └──).
"""

from typing import List

from disk_inventory.domain.tree_models import FileNode

_UNITS = ("B", "KB", "MB", "GB", "TB")

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def format_size(size: int) -> str:
    """Humanize a byte count using binary (1024) steps, e.g. 2048 -> '2.0 KB'."""
    value = float(size)
    for unit in _UNITS[:-1]:
        if value < 1024:
            return f"{int(value)} {unit}" if unit == "B" else f"{value:.1f} {unit}"
        value /= 1024
    return f"{value:.1f} {_UNITS[-1]}"


def render_tree(root: FileNode) -> List[str]:
    """
    Render the whole tree, root header first.

    Each child line shows the name, the exact size in bytes with its
    humanized form, and the entry location.

    Args:
        root: Tree to render.

    Returns:
        List[str]: Output lines, without trailing newlines.
    """
    lines = [f"{root.name}  ({root.size} bytes, {format_size(root.size)})"]
    render_children(root, lines, prefix="")
    return lines


def render_children(node: FileNode, lines: List[str], prefix: str = "") -> None:
    """
    Recursively append one line per child of ``node`` to ``lines``.

    Args:
        node: Node whose children are rendered.
        lines: Accumulator list for output strings.
        prefix: Indentation prefix for the current recursion level.
    """
    total = len(node.children)

    for i, child in enumerate(node.children):
        is_last = (i == total - 1)
        connector = "└── " if is_last else "├── "

        line = f"{prefix}{connector}{child.name}  ({child.size} bytes, {format_size(child.size)})"
        if child.location is not None:
            line += f"  [{child.location}]"
        lines.append(line)

        if child.children:
            render_children(child, lines, prefix=prefix + ("    " if is_last else "│   "))
