"""Logging utilities - one configured logger plus structured event lines."""

from __future__ import annotations

import json
import logging
import time
from typing import Any

_json_mode = False


def get_logger(name: str = "gcr", json_mode: bool | None = None) -> logging.Logger:
    """Get or create a logger with simple format.

    Child loggers ("gcr.controller") propagate to the "gcr" handler, so only
    the root app logger gets a handler attached.
    """
    global _json_mode
    if json_mode is not None:
        _json_mode = json_mode

    logger = logging.getLogger(name)
    root_name = name.split(".")[0]
    root = logging.getLogger(root_name)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s - %(levelname)s - %(message)s"))
        root.addHandler(handler)
        root.setLevel(logging.INFO)
    return logger


def format_event(event: str, **fields: Any) -> str:
    """Render an event as JSON (json mode) or "event key=value ..." text."""
    if _json_mode:
        payload = {"ts": int(time.time() * 1000), "event": event, **fields}
        return json.dumps(payload, default=str)
    parts = [event] + [f"{k}={v}" for k, v in fields.items()]
    return " ".join(parts)


def log_event(
    logger: logging.Logger, event: str, level: int = logging.INFO, **fields: Any
) -> None:
    """Log a structured event."""
    logger.log(level, format_event(event, **fields))
