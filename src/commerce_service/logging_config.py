"""Process-wide logging setup.

``test`` silences everything, ``production`` writes one JSON object per line,
anything else writes readable lines. Every record carries the request id and
the build number.
"""
from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

from commerce_service.api.middleware.correlation_id import correlation_id_ctx
from commerce_service.config import Settings

_TEXT_FORMAT = "%(asctime)s %(levelname)-7s [%(request_id)s] %(name)s: %(message)s"


class ContextFilter(logging.Filter):
    def __init__(self, build_number: str) -> None:
        super().__init__()
        self._build_number = build_number

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = correlation_id_ctx.get() or "-"
        record.build_number = self._build_number
        return True


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "request_id": getattr(record, "request_id", "-"),
            "build_number": getattr(record, "build_number", ""),
        }
        for field in ("status_code", "duration_ms"):
            if hasattr(record, field):
                entry[field] = getattr(record, field)
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def configure_logging(settings: Settings) -> None:
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)

    if settings.ENVIRONMENT == "test":
        logging.disable(logging.CRITICAL)
        return
    logging.disable(logging.NOTSET)

    handler = logging.StreamHandler()
    handler.addFilter(ContextFilter(settings.BUILD_NUMBER))
    if settings.ENVIRONMENT == "production":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(_TEXT_FORMAT))

    root.addHandler(handler)
    root.setLevel(settings.LOG_LEVEL.upper())
