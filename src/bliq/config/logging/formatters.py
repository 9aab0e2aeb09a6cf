"""Formatter JSON de los registros de la librería.

Cada línea trae `timestamp`, `level`, `logger`, `message`, `service` y
`correlation_id`, más los campos `extra` del evento (`api`, `method`,
`endpoint`, `status_code`, `failure_kind`).
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "service",
    "correlation_id",
)

FIELD_RENAME_MAP = {
    "asctime": "timestamp",
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Formatter usado por `configure_logging`; conserva acentos sin escapar."""
    return JsonFormatter(
        " ".join(f"%({field})s" for field in LOG_FIELDS),
        rename_fields=FIELD_RENAME_MAP,
        json_ensure_ascii=False,
    )
