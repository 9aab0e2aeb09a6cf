"""Filter de contexto y redacción para los registros de `bliq.*`."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

# Atributos `extra` que nunca deben llegar a un log en claro
SENSITIVE_ATTRS = frozenset(
    {
        "authorization",
        "token",
        "cer_data",
        "key_data",
        "key_passphrase",
        "pwd",
        "body",
    }
)

REDACTED = "[REDACTED]"


class BliqContextFilter(logging.Filter):
    """Agrega `service` y `correlation_id`, y enmascara datos sensibles.

    Un `correlation_id` enviado vía `extra` tiene prioridad sobre el del
    getter. Los atributos listados en `SENSITIVE_ATTRS` se reemplazan por
    `[REDACTED]` antes de formatear.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._correlation_id_getter = correlation_id_getter

    def _current_correlation_id(self) -> str:
        if self._correlation_id_getter is None:
            return ""
        return self._correlation_id_getter() or ""

    def filter(self, record: logging.LogRecord) -> bool:
        record.service = self._service_name
        if not getattr(record, "correlation_id", ""):
            record.correlation_id = self._current_correlation_id()
        for attr in SENSITIVE_ATTRS.intersection(vars(record)):
            setattr(record, attr, REDACTED)
        return True
