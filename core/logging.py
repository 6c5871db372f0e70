"""JSON log output for the codec and the scripts.

Every record becomes one JSON document on stderr. Graph-related values
passed through ``extra=`` (``source``, ``nodes``, ``links``,
``duration_ms``) are copied into the document when present.
"""

import json
import logging
import sys
from datetime import datetime, timezone

from core.config import settings


class JSONFormatter(logging.Formatter):
    """Format a LogRecord as a JSON object."""

    graph_fields = ("source", "nodes", "links", "duration_ms")

    def __init__(self, indent: int | None = None):
        super().__init__()
        self.indent = indent

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        return created.isoformat(timespec="milliseconds")

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        attrs = vars(record)
        payload.update((k, attrs[k]) for k in self.graph_fields if k in attrs)
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, indent=self.indent, ensure_ascii=False, default=str)


def setup_logging(level: str | None = None, stream=None) -> logging.Handler:
    """Install a single JSON handler on the root logger and return it.

    A JSON handler left by an earlier call is replaced, so the output
    stream can be switched. Indented output in development.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, (level or settings.log_level).upper(), logging.INFO))
    for old in [h for h in root.handlers if isinstance(h.formatter, JSONFormatter)]:
        root.removeHandler(old)
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(JSONFormatter(indent=2 if settings.environment == "development" else None))
    root.addHandler(handler)
    return handler


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
