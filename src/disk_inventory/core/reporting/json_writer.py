from __future__ import annotations

"""
JSON Report Writer.

Serializes an inventory tree to pretty-printed JSON and persists it. The
document is encoded completely in memory before the destination file is
opened, so an encoding failure never leaves a partial report behind.
"""

import json
import logging

from disk_inventory.domain.errors import ReportSerializationError, ReportWriteError
from disk_inventory.domain.tree_models import FileNode
from disk_inventory.infra.fs import write_text_file

logger = logging.getLogger(__name__)

JSON_INDENT = 2

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def serialize_tree(root: FileNode) -> str:
    """
    Encode the tree as an indented JSON document ending with a newline.

    Raises:
        ReportSerializationError: If the tree holds values JSON cannot encode.
    """
    try:
        return json.dumps(root.to_dict(), ensure_ascii=False, indent=JSON_INDENT) + "\n"
    except (TypeError, ValueError) as e:
        raise ReportSerializationError(f"Failed to serialize report: {e}") from e


def save_report(root: FileNode, output_path: str) -> str:
    """
    Write the tree as JSON to ``output_path``, overwriting existing content.

    Args:
        root: Final (filtered and sorted) tree.
        output_path: Destination file. Its directory must already exist.

    Returns:
        str: The path the report was written to.

    Raises:
        ReportSerializationError: If encoding fails.
        ReportWriteError: If the file cannot be written.
    """
    document = serialize_tree(root)

    try:
        write_text_file(output_path, document)
    except (OSError, UnicodeError) as e:
        raise ReportWriteError(f"Failed to write report to '{output_path}': {e}", path=output_path) from e

    logger.info(f"Report written to file: {output_path} ({len(document)} chars)")
    return output_path
