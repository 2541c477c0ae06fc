from __future__ import annotations

"""Logging helpers shared by the jsminify engine, converters and CLI.

This module provides:
    - JsonLogFormatter: one JSON object per record with a fixed schema.
    - setup_base_logger: one-shot configuration of the 'jsminify' logger.
    - get_logger: namespaced logger factory ('jsminify.*').
    - trace_io helpers gated by JSMINIFY_TRACE_IO.

The package version is resolved lazily so importing this module never
pulls in the rest of the package.
"""

import logging
import os
from typing import Optional, TextIO

BASE_LOGGER_NAME = "jsminify"


class JsonLogFormatter(logging.Formatter):
    """Emit logs as compact JSON.

    Fields:
        - ts: ISO-8601 UTC timestamp with millisecond precision.
        - level: Log level name.
        - module: Logger name (e.g., 'jsminify.engine').
        - msg: Formatted message string.
        - version: jsminify.__version__ (fixed per formatter instance).
        - ctx: Optional dictionary attached to the record as 'context'.
    """

    def __init__(self) -> None:
        super().__init__()
        self._version = self._resolve_version()

    @staticmethod
    def _resolve_version() -> str:
        try:
            from jsminify import __version__ as _v  # type: ignore
            return str(_v)
        except ImportError:
            return os.getenv("JSMINIFY_VERSION", "unknown")

    def format(self, record: logging.LogRecord) -> str:
        from datetime import datetime, timezone
        import json

        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        ts_str = ts.isoformat(timespec="milliseconds").replace("+00:00", "Z")

        payload = {
            "ts": ts_str,
            "level": record.levelname,
            "module": record.name,
            "msg": record.getMessage(),
            "version": self._version,
        }

        ctx = getattr(record, "context", None)
        if isinstance(ctx, dict) and ctx:
            payload["ctx"] = ctx

        return json.dumps(payload, ensure_ascii=False)


def setup_base_logger(
    *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None
) -> logging.Logger:
    """Configure the base 'jsminify' logger once and return it.

    Args:
        json_logs: If True, configure a JSON formatter, else plain text.
        level: Logging level for the base logger.
        stream: Optional stream (stderr by default).

    Returns:
        The configured base logger.
    """
    base = logging.getLogger(BASE_LOGGER_NAME)
    if base.handlers:
        base.setLevel(level)
        return base

    import sys as _sys

    base.setLevel(level)
    base.propagate = False

    handler = logging.StreamHandler(stream or _sys.stderr)
    if json_logs:
        handler.setFormatter(JsonLogFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    base.addHandler(handler)

    return base


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a namespaced logger under 'jsminify'."""
    if not name or name == BASE_LOGGER_NAME:
        return logging.getLogger(BASE_LOGGER_NAME)
    if name.startswith(BASE_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{BASE_LOGGER_NAME}.{name}")


def trace_io(logger: logging.Logger, message: str, **ctx) -> None:
    """Emit debug traces only when JSMINIFY_TRACE_IO=1.

    Args:
        logger: Target logger.
        message: Human-readable description.
        **ctx: Optional structured context appended to the message.
    """
    if os.getenv("JSMINIFY_TRACE_IO") != "1":
        return
    if ctx:
        logger.debug("%s | ctx=%r", message, ctx, extra={"context": ctx})
    else:
        logger.debug("%s", message)
