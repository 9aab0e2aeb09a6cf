"""Helpers de logging para las peticiones (sin PII ni credenciales)."""

from __future__ import annotations

from bliq.config.logging import get_logger

logger = get_logger(__name__)


def log_request_failed(
    service: str,
    method: str,
    endpoint: str,
    failure_kind: str,
    status_code: int | None = None,
) -> None:
    """Registra el tipo de fallo antes de propagar el error."""
    logger.debug(
        "bliq_request_failed",
        extra={
            "api": service,
            "method": method,
            "endpoint": endpoint,
            "failure_kind": failure_kind,
            "status_code": status_code,
        },
    )


def log_success(
    service: str,
    method: str,
    endpoint: str,
    status_code: int | None,
) -> None:
    logger.debug(
        "bliq_request_ok",
        extra={
            "api": service,
            "method": method,
            "endpoint": endpoint,
            "status_code": status_code,
        },
    )
