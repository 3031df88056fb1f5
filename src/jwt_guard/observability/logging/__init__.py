"""Observability – structured logging helpers."""
from jwt_guard.observability.logging.factory import JsonLoggerFactory
from jwt_guard.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter
from jwt_guard.observability.logging.processors import get_logger

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "get_logger",
]
