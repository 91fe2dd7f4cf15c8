from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared filesystem fixtures and tree helpers used across the suite.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, Iterator

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from disk_inventory.domain.tree_models import FileNode  # noqa: E402
from disk_inventory.infra.logging import shutdown_logging  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def mock_config_dict(tmp_path: Path) -> Dict[str, Any]:
    """
    Return a valid, complete configuration dictionary for testing.

    Mirrors the keys defined in 'disk_inventory.domain.config'.
    """
    return {
        "input_path": str(tmp_path),
        "max_depth": None,
        "layout": "flat",
        "min_size": 1024,
        "output_path": None,
    }


@pytest.fixture
def disk_project(tmp_path: Path) -> Path:
    """
    Create a small directory tree with known file sizes.

    Structure:
    /disk
      big.bin        (4000 bytes)
      small.txt      (100 bytes)
      /docs
        guide.md     (1500 bytes)
        /deep
          blob.dat   (3000 bytes)
    """
    root = tmp_path / "disk"
    root.mkdir()
    (root / "big.bin").write_bytes(b"x" * 4000)
    (root / "small.txt").write_bytes(b"x" * 100)

    docs = root / "docs"
    docs.mkdir()
    (docs / "guide.md").write_bytes(b"x" * 1500)

    deep = docs / "deep"
    deep.mkdir()
    (deep / "blob.dat").write_bytes(b"x" * 3000)

    return root


@pytest.fixture
def sample_tree() -> FileNode:
    """In-memory tree with one nested level and unsorted sizes."""
    return FileNode(
        name="root",
        size=10_000,
        children=[
            FileNode(name="a", size=500, location="root/a"),
            FileNode(
                name="dir",
                size=6000,
                location="root/dir",
                children=[
                    FileNode(name="x", size=10, location="root/dir/x"),
                    FileNode(name="y", size=4000, location="root/dir/y"),
                    FileNode(name="z", size=1024, location="root/dir/z"),
                ],
            ),
            FileNode(name="b", size=2000, location="root/b"),
            FileNode(name="c", size=2000, location="root/c"),
        ],
    )


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Detach handlers installed by the CLI so tests stay isolated."""
    yield
    shutdown_logging()
    logging.getLogger().setLevel(logging.WARNING)
