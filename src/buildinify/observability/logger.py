"""Structured JSON logging for buildinify.

Each record is written as one JSON object per line, which keeps stderr
readable for humans and parseable for log shippers.  This matters for the
MCP server in particular: stdout carries the protocol stream, so all
diagnostics go to stderr.

Example record::

    {"ts": "2026-01-05T09:12:44.020311+00:00", "level": "DEBUG",
     "logger": "buildinify.fetcher", "message": "children fetched",
     "block_id": "b1", "count": 3}

Usage::

    from buildinify.observability import get_logger

    log = get_logger("buildinify.fetcher")
    log.debug("children fetched", extra={"extra_fields": {"count": 3}})
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any


class StructuredFormatter(logging.Formatter):
    """Render a :class:`logging.LogRecord` as a single-line JSON object.

    Guaranteed keys are ``ts`` (ISO-8601 UTC, taken from the record's own
    creation time), ``level``, ``logger`` and ``message``.  Anything passed
    as ``extra={"extra_fields": {...}}`` is merged into the top level, and
    ``exception`` / ``stack_info`` appear when the record carries them.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        extra_fields: dict[str, Any] | None = getattr(record, "extra_fields", None)
        if extra_fields:
            entry.update(extra_fields)

        if record.exc_info and record.exc_info[1] is not None:
            entry["exception"] = self.formatException(record.exc_info)

        if record.stack_info:
            entry["stack_info"] = self.formatStack(record.stack_info)

        return json.dumps(entry, default=str, ensure_ascii=False)


# Logger names that already carry our handler; keeps get_logger idempotent.
_configured_loggers: set[str] = set()


def get_logger(
    name: str = "buildinify",
    *,
    level: int | str = logging.INFO,
    stream: Any | None = None,
) -> logging.Logger:
    """Return a logger that writes :class:`StructuredFormatter` output.

    Parameters
    ----------
    name:
        Logger name, ``"buildinify"`` by default.  Module loggers use
        dotted children such as ``"buildinify.transport"``.
    level:
        Minimum level, as an ``int`` or a case-insensitive name.  Only
        applied the first time a given *name* is configured.
    stream:
        Destination stream.  Defaults to ``sys.stderr``.

    Repeated calls with the same *name* return the same logger without
    stacking extra handlers.
    """
    logger = logging.getLogger(name)

    if name not in _configured_loggers:
        resolved_level = (
            logging.getLevelName(level.upper())
            if isinstance(level, str)
            else level
        )
        logger.setLevel(resolved_level)

        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(StructuredFormatter())
        logger.addHandler(handler)
        logger.propagate = False

        _configured_loggers.add(name)

    return logger
