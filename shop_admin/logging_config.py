from __future__ import annotations

import logging
import os
from typing import Optional

from pythonjsonlogger import jsonlogger

JSON_FIELDS = "%(asctime)s %(levelname)s %(name)s %(message)s"
PLAIN_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# request logs from Flask's dev server drown out the app's own events
NOISY_LOGGERS = ("werkzeug",)


def _resolve_level(level: Optional[int]) -> int:
    if level is not None:
        return level
    name = os.getenv("SHOP_ADMIN_LOG_LEVEL", "INFO").upper()
    resolved = logging.getLevelName(name)
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(
        level: Optional[int] = None,
        force_format: Optional[str] = None,
) -> None:
    """
    Install a single stream handler on the root logger.

    Format is chosen by, in order: force_format ("json" / "plain"), the
    SHOP_ADMIN_LOG_FORMAT env var, then "json". Level comes from `level` or
    SHOP_ADMIN_LOG_LEVEL (default INFO).

    Callers attach context with `extra={...}`; the JSON formatter turns those
    keys into top-level fields.
    """
    format_mode = (force_format or os.getenv("SHOP_ADMIN_LOG_FORMAT", "json")).lower()

    if format_mode == "plain":
        formatter: logging.Formatter = logging.Formatter(PLAIN_FORMAT)
    else:
        formatter = jsonlogger.JsonFormatter(JSON_FIELDS)

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(_resolve_level(level))
    root.handlers.clear()
    root.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
