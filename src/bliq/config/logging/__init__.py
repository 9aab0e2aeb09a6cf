"""Logging de la librería (logger `bliq`, salida JSON opcional)."""

from bliq.config.logging.config import (
    LIBRARY_LOGGER_NAME,
    configure_logging,
    get_logger,
    install_null_handler,
    reset_logging,
)
from bliq.config.logging.filters import REDACTED, SENSITIVE_ATTRS, BliqContextFilter
from bliq.config.logging.formatters import FIELD_RENAME_MAP, LOG_FIELDS, create_json_formatter

__all__ = [
    "FIELD_RENAME_MAP",
    "LIBRARY_LOGGER_NAME",
    "LOG_FIELDS",
    "REDACTED",
    "SENSITIVE_ATTRS",
    "BliqContextFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "install_null_handler",
    "reset_logging",
]
