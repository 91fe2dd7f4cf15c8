from __future__ import annotations

"""
Disk Tree Data Models.

Provides the node type that makes up an inventory report and the record
emitted by the filesystem walker for every visited entry.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass
class FileNode:
    """
    One filesystem entry in the inventory tree.

    Mutable on purpose: the filter and sort stages rewrite ``children``
    in place once the tree has been built.

    Attributes:
        name: Display name. The root carries the path exactly as given,
              every other node only its base name.
        size: Size in bytes. The root holds the total of every visited entry.
        location: Path of the entry, ``None`` for the root.
        children: Ordered child nodes.
    """
    name: str
    size: int = 0
    location: Optional[str] = None
    children: List[FileNode] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON-ready mapping (name, size, location, children)."""
        return {
            "name": self.name,
            "size": self.size,
            "location": self.location,
            "children": [child.to_dict() for child in self.children],
        }

    def iter_nodes(self):
        """Yield every descendant node, depth-first, excluding self."""
        stack = list(reversed(self.children))
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))


@dataclass(frozen=True)
class WalkEntry:
    """
    A successfully visited filesystem entry.

    Attributes:
        path: Filesystem path used to reach the entry.
        name: Base name of the entry (the full path for the walk root).
        size: Size reported by the entry metadata, in bytes.
        depth: Levels below the walk root (the root itself is 0).
        is_dir: Whether the walker may descend into the entry.
        parent: Path of the parent entry, ``None`` for the walk root.
    """
    path: str
    name: str
    size: int
    depth: int
    is_dir: bool = False
    parent: Optional[str] = None
