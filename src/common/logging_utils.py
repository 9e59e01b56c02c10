"""Logging helpers shared across the package.

Keeps log setup in one place and gives modules a consistent way to attach
structured fields to records via ``extra=``.
"""
from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

from constants import Constants

_RESERVED = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message", "asctime"}


def configure_logging(level: Optional[str] = None) -> None:
    """Configure the root logger.

    The level comes from ``level``, then PACKAGEINFO_LOG_LEVEL, then INFO.
    """
    name = (level or os.environ.get(Constants.ENV_LOG_LEVEL) or "INFO").upper()
    numeric = getattr(logging, name, None)
    if not isinstance(numeric, int):
        numeric = logging.INFO
    logging.basicConfig(level=numeric, format=Constants.LOG_FORMAT, force=True)


def is_debug_enabled(logger: logging.Logger) -> bool:
    """Return True when DEBUG records would be emitted by ``logger``."""
    return logger.isEnabledFor(logging.DEBUG)


def extra_context(**fields: Any) -> Dict[str, Any]:
    """Build an ``extra=`` mapping, dropping None values and reserved names."""
    ctx = {}
    for key, value in fields.items():
        if value is None:
            continue
        if key in _RESERVED:
            key = f"ctx_{key}"
        ctx[key] = value
    return ctx
