from __future__ import annotations

"""
Unit tests for the Console Tree Renderer.
"""

import pytest

from disk_inventory.core.reporting.console_renderer import format_size, render_tree
from disk_inventory.domain.tree_models import FileNode


@pytest.mark.parametrize(
    "size, expected",
    [
        (0, "0 B"),
        (500, "500 B"),
        (1023, "1023 B"),
        (1024, "1.0 KB"),
        (1536, "1.5 KB"),
        (5 * 1024 ** 2, "5.0 MB"),
        (3 * 1024 ** 4, "3.0 TB"),
    ],
)
def test_format_size(size: int, expected: str) -> None:
    assert format_size(size) == expected


def test_render_tree_flat() -> None:
    """Root header followed by one connector line per child."""
    root = FileNode(
        name="data",
        size=3000,
        children=[
            FileNode(name="b", size=2000, location="data/b"),
            FileNode(name="a", size=1000, location="data/a"),
        ],
    )

    lines = render_tree(root)

    assert lines == [
        "data  (3000 bytes, 2.9 KB)",
        "├── b  (2000 bytes, 2.0 KB)  [data/b]",
        "└── a  (1000 bytes, 1000 B)  [data/a]",
    ]


def test_render_tree_nested_indentation(sample_tree: FileNode) -> None:
    """Nested children are indented under their parent."""
    lines = render_tree(sample_tree)

    assert lines[2] == "├── dir  (6000 bytes, 5.9 KB)  [root/dir]"
    assert lines[3].startswith("│   ├── x")
    assert lines[5].startswith("│   └── z")
    assert lines[-1].startswith("└── c")


def test_render_tree_empty_root() -> None:
    assert render_tree(FileNode(name="empty")) == ["empty  (0 bytes, 0 B)"]
