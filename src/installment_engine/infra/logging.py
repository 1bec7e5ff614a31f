"""Structured JSON logging for the HTTP entrypoint."""

from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone
from typing import Any

from pythonjsonlogger import jsonlogger

LOG_FORMAT = "%(timestamp)s %(level)s %(name)s %(message)s"
HANDLER_NAME = "installment_engine"
SERVICE_NAME = "installment-engine"


class EngineJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter adding timestamp, level and service to every record.

    Fields passed through ``extra={...}`` land as top-level keys.
    """

    def add_fields(self, log_record: dict[str, Any], record: logging.LogRecord, message_dict: dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = SERVICE_NAME


def configure_logging(level: str = "INFO") -> None:
    """Install a single JSON stdout handler on the root logger.

    Safe to call repeatedly: a previously installed engine handler is
    replaced, handlers owned by other code are left alone.
    """
    root = logging.getLogger()
    root.setLevel(level)

    for existing in [h for h in root.handlers if h.get_name() == HANDLER_NAME]:
        root.removeHandler(existing)

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(EngineJsonFormatter(LOG_FORMAT))
    root.addHandler(handler)
