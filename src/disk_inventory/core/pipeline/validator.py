from __future__ import annotations

"""
Configuration Validation Service.

Gatekeeper for the inventory pipeline: merges the supplied configuration
over the defaults and coerces every field into the type the engine expects.
In non-strict mode invalid values fall back to defaults and produce
warnings; in strict mode they raise ``ConfigError``.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from disk_inventory.domain.config import LAYOUTS, get_default_config
from disk_inventory.domain.errors import ConfigError

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize the provided configuration dictionary.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raise ``ConfigError`` instead of falling back.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The normalized configuration and
                                          a list of warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    # 1. Base Type Validation
    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise ConfigError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    # 2. Field Processing & Normalization
    merged["input_path"] = _as_str(
        merged.get("input_path"), defaults["input_path"], "input_path", warnings, strict
    )
    merged["output_path"] = _as_optional_str(
        merged.get("output_path"), "output_path", warnings, strict
    )
    merged["max_depth"] = _as_optional_int(
        merged.get("max_depth"), defaults["max_depth"], "max_depth", warnings, strict
    )
    merged["min_size"] = _as_optional_int(
        merged.get("min_size"), defaults["min_size"], "min_size", warnings, strict
    )
    if merged["min_size"] is None:
        merged["min_size"] = defaults["min_size"]

    layout = merged.get("layout")
    if layout not in LAYOUTS:
        _reject(f"Invalid field 'layout': expected one of {', '.join(LAYOUTS)}, received {layout!r}.",
                warnings, strict)
        merged["layout"] = defaults["layout"]

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _reject(msg: str, warnings: List[str], strict: bool) -> None:
    if strict:
        raise ConfigError(msg)
    warnings.append(f"{msg} Using fallback.")


def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate string inputs; only the empty string falls back silently."""
    if value is None:
        return fallback
    if isinstance(value, str):
        # Paths are kept verbatim, surrounding whitespace included
        return value if value else fallback

    _reject(f"Invalid field '{field}': expected str, received {type(value).__name__}.", warnings, strict)
    return fallback


def _as_optional_str(value: Any, field: str, warnings: List[str], strict: bool) -> Optional[str]:
    """Validate an optional string; the empty string becomes None."""
    if value is None:
        return None
    if isinstance(value, str):
        return value if value else None

    _reject(f"Invalid field '{field}': expected str, received {type(value).__name__}.", warnings, strict)
    return None


def _as_optional_int(
        value: Any,
        fallback: Optional[int],
        field: str,
        warnings: List[str],
        strict: bool
) -> Optional[int]:
    """
    Validate a non-negative integer that may be absent.

    Accepts ints and ASCII decimal strings. Booleans are rejected even though
    they are ints in Python.
    """
    if value is None:
        return None

    parsed: Optional[int] = None
    if isinstance(value, bool):
        parsed = None
    elif isinstance(value, int):
        parsed = value
    elif isinstance(value, str) and value.strip().isascii() and value.strip().isdecimal():
        parsed = int(value.strip())

    if parsed is None:
        _reject(f"Invalid field '{field}': expected a non-negative integer, received {value!r}.",
                warnings, strict)
        return fallback

    if parsed < 0:
        _reject(f"Invalid field '{field}': must be >= 0, received {parsed}.", warnings, strict)
        return fallback

    return parsed
