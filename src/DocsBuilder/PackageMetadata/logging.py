# === NAVMAP v1 ===
# {
#   "module": "DocsBuilder.PackageMetadata.logging",
#   "purpose": "Structured logging helpers for manifest discovery and the CLI.",
#   "sections": [
#     {
#       "id": "jsonformatter",
#       "name": "JSONFormatter",
#       "anchor": "class-jsonformatter",
#       "kind": "class"
#     },
#     {
#       "id": "structuredlogger",
#       "name": "StructuredLogger",
#       "anchor": "class-structuredlogger",
#       "kind": "class"
#     },
#     {
#       "id": "get-logger",
#       "name": "get_logger",
#       "anchor": "function-get-logger",
#       "kind": "function"
#     },
#     {
#       "id": "log-event",
#       "name": "log_event",
#       "anchor": "function-log-event",
#       "kind": "function"
#     }
#   ]
# }
# === /NAVMAP ===

"""
Structured logging helpers for manifest discovery and the CLI.

Records carry their structured payload in an ``extra_fields`` attribute. The
JSON formatter flattens that payload into one object per line so build
orchestration can ingest it, while the console formatter keeps interactive
output short.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

__all__ = [
    "LOGGER_NAME",
    "JSONFormatter",
    "StructuredLogger",
    "get_logger",
    "log_event",
]

LOGGER_NAME = "DocsBuilder.PackageMetadata"
CONSOLE_FORMAT = "%(levelname)s: %(message)s"


class JSONFormatter(logging.Formatter):
    """Formatter emitting one JSON document per log record."""

    def format(self, record: logging.LogRecord) -> str:
        """Render ``record`` as a JSON string including structured fields."""

        now = datetime.now(timezone.utc)
        payload: Dict[str, Any] = {
            "timestamp": now.isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        extra_fields = getattr(record, "extra_fields", None)
        if isinstance(extra_fields, dict):
            payload.update(extra_fields)
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


class StructuredLogger(logging.LoggerAdapter):
    """Logger adapter that enriches structured logs with shared context."""

    def __init__(
        self, logger: logging.Logger, base_fields: Optional[Dict[str, Any]] = None
    ) -> None:
        """Store underlying logger and initial structured ``base_fields``."""

        super().__init__(logger, {})
        self.base_fields: Dict[str, Any] = dict(base_fields or {})

    def process(self, msg: str, kwargs: Dict[str, Any]) -> tuple[str, Dict[str, Any]]:
        """Merge adapter context into ``extra`` metadata for structured output."""

        extra = kwargs.setdefault("extra", {})
        fields = dict(self.base_fields)
        extra_fields = extra.get("extra_fields")
        if isinstance(extra_fields, dict):
            fields.update(extra_fields)
        extra["extra_fields"] = fields
        kwargs["extra"] = extra
        return msg, kwargs

    def bind(self, **fields: object) -> "StructuredLogger":
        """Attach additional persistent fields to the adapter and return ``self``."""

        filtered = {k: v for k, v in fields.items() if v is not None}
        self.base_fields.update(filtered)
        return self

    def child(self, **fields: object) -> "StructuredLogger":
        """Create a new adapter inheriting context with optional overrides."""

        merged = dict(self.base_fields)
        merged.update({k: v for k, v in fields.items() if v is not None})
        return StructuredLogger(self.logger, merged)


def get_logger(
    name: str,
    level: str = "INFO",
    *,
    log_format: str = "console",
    base_fields: Optional[Dict[str, Any]] = None,
) -> StructuredLogger:
    """Get a structured logger with a single console or JSON stream handler."""

    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        logger.addHandler(handler)
        logger.propagate = False
    for handler in logger.handlers:
        if str(log_format).lower() == "json":
            handler.setFormatter(JSONFormatter())
        else:
            handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    adapter = getattr(logger, "_docsbuilder_adapter", None)
    if not isinstance(adapter, StructuredLogger):
        adapter = StructuredLogger(logger, base_fields)
        setattr(logger, "_docsbuilder_adapter", adapter)
    elif base_fields:
        adapter.bind(**base_fields)
    return adapter


def log_event(
    logger: logging.Logger | logging.LoggerAdapter, level: str, message: str, **fields: object
) -> None:
    """Emit a structured log record using the ``extra_fields`` convention."""

    normalised_level = str(level).lower()
    if normalised_level in {"warning", "error"} and not fields.get("error_code"):
        fields["error_code"] = "UNKNOWN"
    elif "error_code" in fields:
        fields["error_code"] = str(fields["error_code"]).upper()

    emitter = getattr(logger, normalised_level, None)
    if not callable(emitter):
        raise AttributeError(f"Logger has no level '{level}'")
    emitter(message, extra={"extra_fields": fields})
