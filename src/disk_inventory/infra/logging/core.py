from __future__ import annotations

"""
Root Logger Setup.

Attaches the package's console and file handlers directly to the root
logger. A scan is one synchronous run per process, so records are emitted
inline by the thread that logs them.
"""

import logging
from typing import List

from disk_inventory.infra.logging.config import _LEVEL_MAP, LoggingConfig
from disk_inventory.infra.logging.handlers import build_handlers, is_own_handler


# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Install our handlers on the root logger.

    Calling it again is a no-op while our handlers are attached, unless
    ``force`` is given, in which case they are replaced.

    Args:
        cfg: Logging settings.
        force: Replace handlers installed by a previous call.

    Returns:
        logging.Logger: The root logger.
    """
    root = logging.getLogger()
    installed = _own_handlers(root)
    if installed and not force:
        return root

    _detach(root, installed)

    level = _parse_level(cfg.level)
    root.setLevel(level)
    for handler in build_handlers(cfg, level):
        root.addHandler(handler)

    return root


def shutdown_logging() -> None:
    """Detach and close every handler this package installed."""
    root = logging.getLogger()
    _detach(root, _own_handlers(root))


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _parse_level(level: str) -> int:
    """Convert a level name to its numeric constant (INFO when unknown)."""
    if not level:
        return logging.INFO
    return _LEVEL_MAP.get(str(level).strip().upper(), logging.INFO)


def _own_handlers(root: logging.Logger) -> List[logging.Handler]:
    return [h for h in root.handlers if is_own_handler(h)]


def _detach(root: logging.Logger, handlers: List[logging.Handler]) -> None:
    # Closing a StreamHandler leaves sys.stderr open
    for h in handlers:
        root.removeHandler(h)
        h.close()
