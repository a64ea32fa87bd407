"""Centralized logging helpers.

Modules obtain their own ``logging.getLogger(__name__)`` logger; this module
only owns root configuration and the structured ``extra`` payload used by
DEBUG traces.
"""
from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

from ..constants import Constants


def _resolve_level(level_name: Optional[str]) -> int:
    """Map a level name to its numeric value, defaulting to INFO."""
    if not level_name:
        return logging.INFO
    value = getattr(logging, str(level_name).strip().upper(), None)
    if isinstance(value, int):
        return value
    return logging.INFO


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging once for CLI use.

    The level comes from ``level`` when given, otherwise from the
    ``SEMCHECK_LOG_LEVEL`` environment variable.
    """
    level_name = level or os.environ.get(Constants.ENV_LOG_LEVEL, Constants.DEFAULT_LOG_LEVEL)
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(Constants.LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(_resolve_level(level_name))


def is_debug_enabled(logger: logging.Logger) -> bool:
    """Return True when DEBUG records from ``logger`` would be emitted."""
    return logger.isEnabledFor(logging.DEBUG)


def extra_context(**fields: Any) -> Dict[str, Any]:
    """Build the ``extra`` mapping for a structured log record.

    None values are dropped so handlers only see populated fields.
    """
    return {"context": {k: v for k, v in fields.items() if v is not None}}
