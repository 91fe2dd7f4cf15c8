from __future__ import annotations

"""
Unit tests for Domain Models.

Verifies:
1. FileNode serialization order and traversal helpers.
2. Data integrity of InventoryResult factories (Success/Error).
3. Immutability of frozen dataclasses.
4. Error kinds attached to each exception type.
"""

import dataclasses

import pytest

from disk_inventory.domain.errors import (
    ConfigError,
    ErrorKind,
    MetadataError,
    ReportSerializationError,
    ReportWriteError,
)
from disk_inventory.domain.report_models import (
    InventoryResult,
    create_error_result,
    create_success_result,
)
from disk_inventory.domain.tree_models import FileNode, WalkEntry


def test_file_node_defaults() -> None:
    node = FileNode(name="x")

    assert node.size == 0
    assert node.location is None
    assert node.children == []


def test_file_node_children_not_shared() -> None:
    """Each node gets its own children list."""
    a, b = FileNode(name="a"), FileNode(name="b")
    a.children.append(FileNode(name="c"))

    assert b.children == []


def test_file_node_to_dict_key_order(sample_tree: FileNode) -> None:
    data = sample_tree.to_dict()

    assert list(data) == ["name", "size", "location", "children"]
    assert list(data["children"][0]) == ["name", "size", "location", "children"]
    assert data["children"][1]["children"][0]["name"] == "x"


def test_file_node_iter_nodes_pre_order(sample_tree: FileNode) -> None:
    assert [n.name for n in sample_tree.iter_nodes()] == ["a", "dir", "x", "y", "z", "b", "c"]


def test_walk_entry_is_frozen() -> None:
    entry = WalkEntry(path="p", name="p", size=1, depth=0)

    with pytest.raises(dataclasses.FrozenInstanceError):
        entry.size = 2  # type: ignore[misc]


def test_create_success_result_populates_fields(mock_config_dict, sample_tree: FileNode) -> None:
    result = create_success_result(
        cfg=mock_config_dict,
        root=sample_tree,
        output_path="out.json",
        summary_extra={"total_size": 10_000},
    )

    assert isinstance(result, InventoryResult)
    assert result.ok is True
    assert result.error == ""
    assert result.error_kind is None
    assert result.root is sample_tree
    assert result.output_path == "out.json"
    assert result.min_size == 1024
    assert result.layout == "flat"
    assert result.summary["total_size"] == 10_000


def test_create_error_result_handles_defaults() -> None:
    result = create_error_result("Disk exploded", ErrorKind.WRITE, {})

    assert result.ok is False
    assert result.error == "Disk exploded"
    assert result.error_kind is ErrorKind.WRITE
    assert result.root is None
    assert result.min_size == 1024
    assert result.summary == {}


def test_inventory_result_is_frozen(mock_config_dict, sample_tree: FileNode) -> None:
    result = create_success_result(mock_config_dict, sample_tree)

    with pytest.raises(dataclasses.FrozenInstanceError):
        result.ok = False  # type: ignore[misc]


@pytest.mark.parametrize(
    "exc_type, kind",
    [
        (ConfigError, ErrorKind.ARGUMENT),
        (MetadataError, ErrorKind.METADATA),
        (ReportSerializationError, ErrorKind.SERIALIZATION),
        (ReportWriteError, ErrorKind.WRITE),
    ],
)
def test_error_kinds(exc_type, kind) -> None:
    err = exc_type("message", path="/some/path")

    assert err.kind is kind
    assert err.message == "message"
    assert err.path == "/some/path"
    assert str(err) == "message"
