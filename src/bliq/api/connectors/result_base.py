"""Base de los resultados tipados.

Un resultado es una proyección de sólo lectura del campo `data` de un
envelope exitoso. Nunca vuelve a contactar al servicio.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from bliq.api.connectors.errors import ProtocolError

DATA_KEY = "data"


def parse_datetime(value: Any, field: str) -> datetime:
    """Convierte una fecha ISO 8601 del servicio a `datetime`."""
    if isinstance(value, datetime):
        return value
    try:
        return datetime.fromisoformat(str(value))
    except ValueError as exc:
        raise ProtocolError(
            f"Fecha inválida en '{field}': {value}",
            reason="invalid_data",
        ) from exc


class ApiResult:
    """Envuelve el `data` de un envelope.

    Args:
        response: Envelope decodificado (`{"data": ...}`).

    Raises:
        ProtocolError: Si el envelope no trae `data`.
    """

    __slots__ = ("_data",)

    def __init__(self, response: Mapping[str, Any]) -> None:
        if not isinstance(response, Mapping) or DATA_KEY not in response:
            raise ProtocolError(
                "Respuesta sin campo data",
                reason="missing_data",
            )
        # Copia propia: cambios posteriores del llamador no afectan al resultado
        self._data = copy.deepcopy(response[DATA_KEY])

    def _field(self, name: str) -> Any:
        if not isinstance(self._data, Mapping) or name not in self._data:
            raise ProtocolError(
                f"Respuesta sin campo '{name}'",
                reason="missing_data",
            )
        return self._data[name]

    def _optional(self, name: str) -> Any:
        if not isinstance(self._data, Mapping):
            return None
        return self._data.get(name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
