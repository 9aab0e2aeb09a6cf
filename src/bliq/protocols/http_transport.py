"""Contrato del colaborador HTTP.

Es la única frontera de IO de la librería: cualquier cliente HTTP capaz
puede sustituir a la implementación por defecto (`HttpxTransport`).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class TransportResponse:
    """Resultado crudo de una petición.

    Attributes:
        status_code: Código HTTP, si el servidor llegó a responder.
        body: Cuerpo crudo de la respuesta.
        error: Detalle del fallo de red; None si la petición se completó.
    """

    status_code: int | None = None
    body: str | None = None
    error: str | None = None


class HttpTransportProtocol(Protocol):
    """Contrato mínimo para ejecutar una petición HTTP síncrona.

    Los fallos de red se reportan en `TransportResponse.error`, no como
    excepciones.
    """

    def request(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        body: str | None = None,
    ) -> TransportResponse: ...
