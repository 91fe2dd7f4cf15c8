from __future__ import annotations

"""
Handler Factories.

Builds the console and rotating-file handlers for a ``LoggingConfig``.
Every handler built here carries a marker attribute, so reconfiguration
and shutdown only touch handlers this package installed, never those
added by the host application or by pytest.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import List, Optional

from disk_inventory.infra.logging.config import LoggingConfig

_OWN_HANDLER_ATTR: str = "_disk_inventory_handler"


def mark_own_handler(handler: logging.Handler) -> logging.Handler:
    setattr(handler, _OWN_HANDLER_ATTR, True)
    return handler


def is_own_handler(handler: logging.Handler) -> bool:
    return bool(getattr(handler, _OWN_HANDLER_ATTR, False))


def build_handlers(cfg: LoggingConfig, level: int) -> List[logging.Handler]:
    """
    Create the handlers requested by ``cfg``, all set to ``level``.

    Args:
        cfg: Logging settings.
        level: Numeric level applied to every handler.

    Returns:
        List[logging.Handler]: Marked handlers, possibly empty.
    """
    handlers: List[logging.Handler] = []

    if cfg.console:
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(logging.Formatter(cfg.console_fmt))
        handlers.append(console)

    if cfg.log_file:
        log_file = _open_log_file(cfg)
        if log_file is not None:
            handlers.append(log_file)

    for handler in handlers:
        handler.setLevel(level)
        mark_own_handler(handler)
    return handlers


def _open_log_file(cfg: LoggingConfig) -> Optional[RotatingFileHandler]:
    """Open the rotating log file; on failure warn on stderr and return None."""
    try:
        os.makedirs(os.path.dirname(os.path.abspath(cfg.log_file)), exist_ok=True)
        handler = RotatingFileHandler(
            cfg.log_file,
            maxBytes=int(cfg.max_bytes),
            backupCount=int(cfg.backup_count),
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"WARNING: Cannot open log file '{cfg.log_file}': {e}\n")
        return None

    handler.setFormatter(logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt))
    return handler
