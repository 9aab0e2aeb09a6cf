"""Decodificación del cuerpo y reglas de éxito del envelope.

Se observan dos variantes de envelope, ambas con `data` en caso de éxito:

- STATUS_CODE (mensajería, timbrado legado): éxito si el HTTP status está
  en [200, 300); el fallo puede traer `error.message`.
- SUCCESS_FLAG (timbrado actual): éxito si `success` es exactamente `true`,
  sin importar el HTTP status; el fallo trae `error_message` y/o una lista
  `errors` de objetos `{description, ...}`.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import Any

from bliq.api.connectors.errors import (
    EMPTY_BODY_ERROR_CODE,
    INVALID_JSON_ERROR_CODE,
    ApplicationError,
    ProtocolError,
)

DEFAULT_FAILURE_MESSAGE = "Solicitud no exitosa"


class EnvelopeVariant(str, Enum):
    """Regla de éxito aplicada al envelope de respuesta."""

    STATUS_CODE = "status_code"
    SUCCESS_FLAG = "success_flag"


def _reject_constant(value: str) -> Any:
    # NaN e Infinity no son JSON estricto
    raise ValueError(f"Constante JSON no permitida: {value}")


def parse_response(body: str | None) -> dict[str, Any]:
    """Decodifica estrictamente el cuerpo crudo a un objeto JSON.

    Raises:
        ProtocolError: Si el cuerpo está vacío, no es JSON válido, es el
            literal `null` o no es un objeto.
    """
    if body is None or body == "":
        raise ProtocolError(
            "Respuesta no válida: vacía",
            reason="empty_body",
            code=EMPTY_BODY_ERROR_CODE,
        )

    try:
        decoded = json.loads(body, parse_constant=_reject_constant)
    except ValueError as exc:
        raise ProtocolError(
            f"Respuesta no válida: {body}",
            reason="invalid_json",
            raw_body=body,
            code=INVALID_JSON_ERROR_CODE,
        ) from exc

    # `null` se trata igual que un fallo de decodificación
    if not isinstance(decoded, dict):
        raise ProtocolError(
            f"Respuesta no válida: {body}",
            reason="invalid_json",
            raw_body=body,
            code=INVALID_JSON_ERROR_CODE,
        )
    return decoded


def extract_sub_errors(envelope: dict[str, Any]) -> list[dict[str, Any]]:
    """Devuelve la lista `errors` del envelope (vacía si no existe)."""
    errors = envelope.get("errors")
    if not isinstance(errors, list):
        return []
    return [item for item in errors if isinstance(item, dict)]


def extract_failure_message(variant: EnvelopeVariant, envelope: dict[str, Any]) -> str:
    """Elige el mejor mensaje disponible para un envelope fallido."""
    if variant is EnvelopeVariant.STATUS_CODE:
        error_obj = envelope.get("error")
        if isinstance(error_obj, dict) and error_obj.get("message") is not None:
            return str(error_obj["message"])
        return DEFAULT_FAILURE_MESSAGE

    if envelope.get("error_message") is not None:
        return str(envelope["error_message"])

    sub_errors = extract_sub_errors(envelope)
    if sub_errors and sub_errors[0].get("description") is not None:
        return str(sub_errors[0]["description"])
    return DEFAULT_FAILURE_MESSAGE


def is_success(
    variant: EnvelopeVariant,
    status_code: int | None,
    envelope: dict[str, Any],
) -> bool:
    if variant is EnvelopeVariant.STATUS_CODE:
        return status_code is not None and 200 <= status_code < 300
    return envelope.get("success") is True


def assert_success(
    variant: EnvelopeVariant,
    status_code: int | None,
    envelope: dict[str, Any],
) -> None:
    """Aplica la regla de éxito de la variante.

    Raises:
        ApplicationError: Si el envelope indica fallo.
    """
    if is_success(variant, status_code, envelope):
        return

    raise ApplicationError(
        extract_failure_message(variant, envelope),
        errors=extract_sub_errors(envelope),
        status_code=status_code,
        response_body=envelope,
    )
