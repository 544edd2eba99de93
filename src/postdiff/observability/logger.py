"""Structured JSON logging for postdiff.

Records are written as single-line JSON objects.  Structured fields passed
through ``extra={"extra_fields": {...}}`` are merged into the object, and
postdiff records among them (revisions, deltas, enums) are serialised in
their wire form, so a revision dump reads the same as ``Revision.to_dict()``::

    {"ts": "2025-07-01T12:00:00.123456+00:00", "level": "DEBUG",
     "logger": "postdiff.revision", "message": "revision generated",
     "post_id": "abc123", "revision": {"id": "...", "parts_deltas": [...]}}
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from enum import Enum
from typing import Any, TextIO


def _json_default(value: Any) -> Any:
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    if isinstance(value, Enum):
        return value.value
    return str(value)


class StructuredFormatter(logging.Formatter):
    """Format log records as single-line JSON objects.

    Guaranteed keys are ``ts`` (record creation time, ISO-8601 UTC),
    ``level``, ``logger`` and ``message``.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(getattr(record, "extra_fields", None) or {})
        return json.dumps(entry, default=_json_default)


def _has_structured_handler(logger: logging.Logger) -> bool:
    return any(isinstance(h.formatter, StructuredFormatter) for h in logger.handlers)


def get_logger(
    name: str = "postdiff",
    *,
    level: int | str = logging.DEBUG,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Return the logger *name* with a JSON handler attached.

    The handler, level and ``propagate = False`` are set up on the first
    call for a given name only; later calls return the logger unchanged.

    Parameters
    ----------
    name:
        Logger name, ``"postdiff"`` or a dotted child such as
        ``"postdiff.revision"``.
    level:
        Minimum level, as an ``int`` or a case-insensitive level name.
    stream:
        Handler output.  Defaults to ``sys.stderr``.
    """
    logger = logging.getLogger(name)
    if _has_structured_handler(logger):
        return logger

    logger.setLevel(level.upper() if isinstance(level, str) else level)
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(StructuredFormatter())
    logger.addHandler(handler)
    logger.propagate = False
    return logger
