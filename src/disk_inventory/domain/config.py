from __future__ import annotations

"""
Run Configuration Defaults.

The inventory pipeline is driven by a plain dictionary. This module owns
the keys of that dictionary and their default values.
"""

from typing import Any, Dict, Tuple

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
DEFAULT_INPUT_PATH = "."
DEFAULT_MIN_SIZE = 1024

LAYOUT_FLAT = "flat"
LAYOUT_NESTED = "nested"
LAYOUTS: Tuple[str, ...] = (LAYOUT_FLAT, LAYOUT_NESTED)


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default run configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Scan
        "input_path": DEFAULT_INPUT_PATH,
        "max_depth": None,
        "layout": LAYOUT_FLAT,

        # Filtering
        "min_size": DEFAULT_MIN_SIZE,

        # Output
        "output_path": None,
    }
