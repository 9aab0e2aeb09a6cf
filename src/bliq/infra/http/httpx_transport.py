"""Transporte HTTP por defecto basado en httpx.

Una petición es exactamente un intento: no hay reintentos ni backoff.
El código de estado se devuelve tal cual; interpretarlo es tarea de la
capa de envelope.
"""

from __future__ import annotations

import httpx

from bliq.config.logging import get_logger
from bliq.config.settings import HttpSettings, get_http_settings
from bliq.protocols.http_transport import TransportResponse

logger = get_logger(__name__)


class HttpxTransport:
    """Implementa `HttpTransportProtocol` con un `httpx.Client` síncrono.

    Args:
        settings: Timeout, verificación TLS y headers por defecto. Si es
            None se cargan del entorno.
        transport: Transporte httpx opcional (p. ej. `httpx.MockTransport`
            en pruebas).
    """

    def __init__(
        self,
        settings: HttpSettings | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._settings = settings or get_http_settings()
        self._transport = transport

    @property
    def settings(self) -> HttpSettings:
        return self._settings

    def request(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        body: str | None = None,
    ) -> TransportResponse:
        merged_headers = {**self._settings.default_headers, **headers}
        content = body.encode("utf-8") if body is not None else None
        try:
            with httpx.Client(
                verify=self._settings.verify_ssl,
                timeout=self._settings.timeout_seconds,
                transport=self._transport,
            ) as client:
                response = client.request(
                    method,
                    url,
                    headers=merged_headers,
                    content=content,
                )
        except httpx.HTTPError as exc:
            logger.debug(
                "bliq_transport_error",
                extra={"method": method, "error_type": type(exc).__name__},
            )
            return TransportResponse(error=str(exc) or type(exc).__name__)

        return TransportResponse(status_code=response.status_code, body=response.text)
