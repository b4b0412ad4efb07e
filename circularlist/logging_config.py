"""Structured JSON logging for circular list diagnostics.

Library code only emits records through ``logging.getLogger("circularlist.*")``;
applications that want the JSON line format opt in explicitly.

Usage::

    from circularlist.logging_config import configure_logging
    configure_logging()
"""

from __future__ import annotations

import json
import logging
import sys
import traceback
from datetime import datetime, timezone
from typing import Optional

from circularlist.settings import get_settings

# Fields that list code passes via ``extra={}``, in output order.
_LIST_FIELDS = (
    "operation",
    "mutability",
    "size",
    "pivot",
    "steps",
    "strategy",
    "rotation",
)


class JsonLineFormatter(logging.Formatter):
    """
    Emit one JSON object per log line.

    List state attached through ``extra`` is grouped under ``"list"``. A
    record carrying an exception gets an ``"error"`` object naming the
    exception class, and a stack trace only at ERROR and above.
    """

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload: dict = {
            "time": created.isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "event": record.getMessage(),
        }

        state = {
            name: getattr(record, name)
            for name in _LIST_FIELDS
            if getattr(record, name, None) is not None
        }
        if state:
            payload["list"] = state

        if record.exc_info and record.exc_info[1] is not None:
            exc_type, exc, tb = record.exc_info
            payload["error"] = {"type": exc_type.__name__, "detail": str(exc)}
            if record.levelno >= logging.ERROR:
                payload["error"]["stack_trace"] = "".join(
                    traceback.format_exception(exc_type, exc, tb)
                )

        return json.dumps(payload, default=str)


def configure_logging(level: Optional[int] = None) -> None:
    """Install the JSON formatter on the root logger.

    Safe to call multiple times; clears existing handlers first. The level
    defaults to ``CIRCULARLIST_LOG_LEVEL``.
    """
    root = logging.getLogger()
    root.setLevel(get_settings().log_level_value if level is None else level)

    for handler in root.handlers[:]:
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonLineFormatter())
    root.addHandler(handler)
