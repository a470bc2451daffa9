"""Observability – structured logging helpers."""
from modrinth_client.observability.logging.factory import JsonLoggerFactory, get_logger
from modrinth_client.observability.logging.filters import (
    DEFAULT_SENSITIVE_FIELDS,
    SensitiveFieldsFilter,
)

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "get_logger",
]
