"""Structured logging utilities for the command line tool."""

from __future__ import annotations

import json
import logging
import re
from datetime import datetime, timezone
from typing import Any, Dict


class JsonFormatter(logging.Formatter):
    """Render log records as JSON payloads."""

    #: Attributes provided by :mod:`logging` that should not leak into the payload.
    _RESERVED = {
        "args",
        "asctime",
        "created",
        "exc_info",
        "exc_text",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "message",
        "module",
        "msecs",
        "msg",
        "name",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "taskName",
        "thread",
        "threadName",
    }

    def format(
        self, record: logging.LogRecord
    ) -> str:  # noqa: D401 - docstring inherited
        payload: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc)
            .isoformat()
            .replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key, value in record.__dict__.items():
            if key not in self._RESERVED and not key.startswith("_"):
                payload[key] = value

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        if record.stack_info:
            payload["stack"] = record.stack_info

        return json.dumps(payload, ensure_ascii=False, default=str)


class ApiKeyRedactor(logging.Filter):
    """Mask the ``appid`` query parameter wherever a request URL is logged."""

    _pattern = re.compile(r"(appid=)[^&\s'\"]+", re.IGNORECASE)

    def _redact(self, value: Any) -> Any:
        if isinstance(value, str):
            return self._pattern.sub(r"\1***REDACTED***", value)
        if value is not None and not isinstance(value, (int, float, bool)):
            # httpx passes URL objects, not strings
            text = str(value)
            redacted = self._pattern.sub(r"\1***REDACTED***", text)
            if redacted != text:
                return redacted
        return value

    def filter(self, record: logging.LogRecord) -> bool:
        try:
            if isinstance(record.msg, str):
                record.msg = self._redact(record.msg)
            if record.args:
                if isinstance(record.args, tuple):
                    record.args = tuple(self._redact(a) for a in record.args)
                elif isinstance(record.args, dict):
                    record.args = {k: self._redact(v) for k, v in record.args.items()}
        except Exception:  # nosec B110 - never break logging
            pass
        return True


def configure_logging(level: int = logging.WARNING) -> None:
    """Configure root logging handler for structured output on stderr."""

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    handler.addFilter(ApiKeyRedactor())

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(level)
    root_logger.addHandler(handler)

    logging.captureWarnings(True)

    # HTTP client loggers print full request URLs; only let them through when debugging.
    client_level = level if level <= logging.DEBUG else logging.WARNING
    logging.getLogger("httpx").setLevel(client_level)
    logging.getLogger("httpcore").setLevel(client_level)
