"""JSON-lines logging for feishuify.

A record such as::

    log.warning("table dropped", extra={"extra_fields": {"rows": 1}})

is written as one line::

    {"ts": "2026-10-18T09:30:00.123456+00:00", "level": "WARNING",
     "logger": "feishuify.converter", "message": "table dropped", "rows": 1}
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, TextIO


class StructuredFormatter(logging.Formatter):
    """Render each :class:`logging.LogRecord` as a single JSON object.

    The object always holds ``ts`` (UTC, ISO-8601), ``level``, ``logger``
    and ``message``.  The ``extra_fields`` dict of a record is merged in at
    the top level.  Tracebacks land under ``exception`` and stack dumps
    under ``stack_info``.  Values that JSON cannot encode are written with
    ``str()``.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(getattr(record, "extra_fields", None) or {})

        if record.exc_info and record.exc_info[1] is not None:
            entry["exception"] = self.formatException(record.exc_info)
        if record.stack_info:
            entry["stack_info"] = self.formatStack(record.stack_info)

        return json.dumps(entry, default=str)


# Logger names that already carry a StructuredFormatter handler.
_configured_loggers: set[str] = set()


def get_logger(
    name: str = "feishuify",
    *,
    level: int | str = logging.DEBUG,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Return the logger *name*, attaching a JSON handler on first use.

    Parameters
    ----------
    name:
        Dotted logger name.
    level:
        Threshold as an ``int`` or a level name in any case (``"warning"``).
        Ignored once *name* has been configured.
    stream:
        Where the handler writes.  ``sys.stderr`` when omitted.

    Later calls with the same *name* return the same logger untouched, so
    modules can call this at import time without duplicating output.
    Records do not propagate to the root logger.
    """
    logger = logging.getLogger(name)
    if name in _configured_loggers:
        return logger

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logger.setLevel(level)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(StructuredFormatter())
    logger.addHandler(handler)
    logger.propagate = False

    _configured_loggers.add(name)
    return logger
