"""Taxonomía de errores de los clientes Bliq.

Todos son resultados terminales de una sola llamada: la librería no
reintenta. El llamador decide qué hacer según el tipo (p. ej. reintentar
ante `TransportError`, mostrar `ApplicationError.errors` al usuario).
"""

from __future__ import annotations

from typing import Any

# Códigos numéricos heredados de la API
CONFIGURATION_ERROR_CODE = 10
APPLICATION_ERROR_CODE = 20
TRANSPORT_ERROR_CODE = 30
EMPTY_BODY_ERROR_CODE = 31
INVALID_JSON_ERROR_CODE = 32


class BliqApiError(Exception):
    """Error base de los clientes Bliq."""

    def __init__(
        self,
        message: str,
        code: int = 0,
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.errors: list[dict[str, Any]] = list(errors or [])


class ConfigurationError(BliqApiError):
    """Entrada inválida al construir el cliente o armar una petición."""

    def __init__(self, message: str) -> None:
        super().__init__(message, CONFIGURATION_ERROR_CODE)


class TransportError(BliqApiError):
    """El colaborador HTTP reportó un fallo de red."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"Respuesta no válida: {detail}", TRANSPORT_ERROR_CODE)
        self.detail = detail


class ProtocolError(BliqApiError):
    """Cuerpo de respuesta vacío, no decodificable o sin la forma esperada.

    Attributes:
        reason: `empty_body`, `invalid_json`, `missing_data` o `invalid_data`.
        raw_body: Cuerpo crudo recibido, para diagnóstico.
    """

    def __init__(
        self,
        message: str,
        reason: str,
        raw_body: str | None = None,
        code: int = INVALID_JSON_ERROR_CODE,
    ) -> None:
        super().__init__(message, code)
        self.reason = reason
        self.raw_body = raw_body


class ApplicationError(BliqApiError):
    """El servidor reportó la solicitud como no exitosa.

    Attributes:
        errors: Sub-errores estructurados enviados por el servidor.
        status_code: Código HTTP de la respuesta, si se conoce.
        response_body: Envelope decodificado completo.
    """

    def __init__(
        self,
        message: str,
        errors: list[dict[str, Any]] | None = None,
        status_code: int | None = None,
        response_body: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, APPLICATION_ERROR_CODE, errors)
        self.status_code = status_code
        self.response_body: dict[str, Any] = response_body or {}
