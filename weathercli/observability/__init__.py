"""Observability utilities (logging)."""

from .logging import ApiKeyRedactor, JsonFormatter, configure_logging

__all__ = [
    "ApiKeyRedactor",
    "JsonFormatter",
    "configure_logging",
]
