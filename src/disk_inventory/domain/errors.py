from __future__ import annotations

"""
Domain Error Taxonomy.

Every failure the inventory can surface carries an ``ErrorKind`` so that
callers can tell a skipped entry apart from a fatal report failure without
parsing messages.
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Category of an inventory failure."""
    ARGUMENT = "argument"
    METADATA = "metadata"
    SERIALIZATION = "serialization"
    WRITE = "write"


class InventoryError(Exception):
    """Base class for all inventory failures."""

    kind: ErrorKind = ErrorKind.ARGUMENT

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.path = path


class ConfigError(InventoryError):
    """Invalid configuration value (depth, size, layout, paths)."""
    kind = ErrorKind.ARGUMENT


class MetadataError(InventoryError):
    """Entry metadata or directory listing could not be read."""
    kind = ErrorKind.METADATA


class ReportSerializationError(InventoryError):
    """The tree could not be encoded as JSON."""
    kind = ErrorKind.SERIALIZATION


class ReportWriteError(InventoryError):
    """The encoded report could not be written to its destination."""
    kind = ErrorKind.WRITE
