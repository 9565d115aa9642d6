from __future__ import annotations

"""Logging helpers for cmdflags: logger names, handler setup and IO tracing.

This module provides:
    - JsonLogFormatter: one JSON object per record, with the flag source and
      flag names lifted out of the record context.
    - setup_base_logger: handler setup for the 'cmdflags' logger.
    - get_logger: namespaced logger factory ('cmdflags.*').
    - trace_io utilities gated by CMDFLAGS_TRACE_IO.

The library modules only ever call `get_logger`; configuring handlers is
left to the application (the `cmdflags` console script does it through
`DefaultLoggerFactory`).
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional, TextIO

BASE_LOGGER = "cmdflags"

# Context keys promoted to top-level JSON fields.
_LIFTED_KEYS = ("source", "flags")


class JsonLogFormatter(logging.Formatter):
    """Render parser diagnostics as compact JSON lines.

    Every line carries ts (UTC, millisecond precision), level, module (the
    logger name), msg and version. When the record has a 'context' dict,
    its 'source' ('<cli>' or the flag file path) and 'flags' (the offending
    flag names) become top-level fields; any other keys stay under 'ctx'.

    Args:
        version: Value for the 'version' field. Defaults to CMDFLAGS_VERSION
            from the environment, then 'unknown'.
    """

    def __init__(self, version: Optional[str] = None) -> None:
        super().__init__()
        self.version = version or os.getenv("CMDFLAGS_VERSION", "unknown")

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload: Dict[str, Any] = {
            "ts": ts.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            "level": record.levelname,
            "module": record.name,
            "msg": record.getMessage(),
            "version": self.version,
        }

        ctx = dict(getattr(record, "context", None) or {})
        for key in _LIFTED_KEYS:
            if key in ctx:
                payload[key] = ctx.pop(key)
        if ctx:
            payload["ctx"] = ctx
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False)


def level_from_env(default: int = logging.INFO) -> int:
    """Return the level named by CMDFLAGS_LOG_LEVEL, or *default*."""
    name = (os.getenv("CMDFLAGS_LOG_LEVEL") or "").strip().upper()
    if not name:
        return default
    value = logging.getLevelName(name)
    return value if isinstance(value, int) else default


def setup_base_logger(
    *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None
) -> logging.Logger:
    """Attach a single stderr (or *stream*) handler to the 'cmdflags' logger.

    Plain output reads like 'WARNING: Flags not declared in CmdParser: -x,
    ignored'; with *json_logs* each record goes through `JsonLogFormatter`
    stamped with the installed cmdflags version. A second call only adjusts
    the level, so the handler is never duplicated.
    """
    base = logging.getLogger(BASE_LOGGER)
    base.setLevel(level)
    if base.handlers:
        return base

    if json_logs:
        from cmdflags import __version__

        formatter: logging.Formatter = JsonLogFormatter(version=__version__)
    else:
        formatter = logging.Formatter("%(levelname)s: %(message)s")

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(formatter)
    base.addHandler(handler)
    base.propagate = False
    return base


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a namespaced logger under 'cmdflags'."""
    if not name or name == BASE_LOGGER:
        return logging.getLogger(BASE_LOGGER)
    if name.startswith(BASE_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{BASE_LOGGER}.{name}")


def is_trace_io_enabled() -> bool:
    """Check if IO tracing is enabled via env flag."""
    return os.getenv("CMDFLAGS_TRACE_IO") == "1"


def trace_io(logger: logging.Logger, message: str, **ctx) -> None:
    """Emit debug-verbosity IO trace messages only when enabled.

    Args:
        logger: Target logger.
        message: Human-readable description.
        **ctx: Optional structured context, attached to the record as 'context'.
    """
    if not is_trace_io_enabled():
        return
    if ctx:
        logger.debug("%s | ctx=%r", message, ctx, extra={"context": ctx})
    else:
        logger.debug("%s", message)
