"""Resultados tipados del servicio de timbrado.

Hay tres generaciones del resultado de cancelación, una por versión de
endpoint; `cancel_result_for` construye la que corresponde.
"""

from __future__ import annotations

import base64
import binascii
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from bliq.api.connectors.errors import ProtocolError
from bliq.api.connectors.result_base import ApiResult, parse_datetime
from bliq.domain.cancel_version import CancelApiVersion


class CreateCfdiResult(ApiResult):
    """CFDI creado y timbrado."""

    __slots__ = ("_date", "_uuid", "_xml")

    def __init__(self, response: Mapping[str, Any]) -> None:
        super().__init__(response)
        self._uuid = self._field("uuid")
        self._date = parse_datetime(self._field("fecha_timbrado"), "fecha_timbrado")
        self._xml = self._field("xml")

    def uuid(self) -> str:
        return self._uuid

    def date(self) -> datetime:
        """Fecha de timbrado."""
        return self._date

    def xml(self) -> str:
        return self._xml

    def __repr__(self) -> str:
        return f"CreateCfdiResult(uuid={self._uuid!r})"


class CreatePdfResult(ApiResult):
    """PDF generado; `data` viaja en base64 y se entrega decodificado."""

    __slots__ = ("_pdf",)

    def __init__(self, response: Mapping[str, Any]) -> None:
        super().__init__(response)
        encoded = self._data
        if not isinstance(encoded, str):
            raise ProtocolError(
                "El PDF no viene codificado como texto base64",
                reason="invalid_data",
            )
        # El servicio puede enviar el base64 partido en líneas
        compact = "".join(encoded.split())
        try:
            self._pdf = base64.b64decode(compact, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise ProtocolError(
                "El PDF no es base64 válido",
                reason="invalid_data",
            ) from exc

    def data(self) -> bytes:
        return self._pdf


class FetchCfdiResult(ApiResult):
    """XML de un CFDI recuperado por UUID."""

    __slots__ = ()

    def xml(self) -> str:
        return self._data


class StatusCfdiResult(ApiResult):
    """Estatus de un CFDI según el SAT."""

    __slots__ = ()

    def codigo_estatus(self) -> str:
        return self._field("codigo_estatus")

    def estado(self) -> str:
        """Vigente / Cancelado / No Encontrado."""
        return self._field("estado")

    def es_cancelable(self) -> str:
        return self._field("es_cancelable")

    def estatus_cancelacion(self) -> str:
        return self._field("estatus_cancelacion")


class CancelCfdiResult(ApiResult):
    """Cancelación v1: fecha de cancelación y acuse."""

    __slots__ = ("_date", "_xml")

    def __init__(self, response: Mapping[str, Any]) -> None:
        super().__init__(response)
        self._date = parse_datetime(self._field("fecha_cancelado"), "fecha_cancelado")
        self._xml = self._optional("xml")

    def date(self) -> datetime:
        return self._date

    def xml(self) -> str | None:
        return self._xml

    def uuid(self) -> str | None:
        return self._optional("uuid")


class CancelCfdiResultV2(ApiResult):
    """Cancelación v2: agrega estatus del UUID y de la cancelación."""

    __slots__ = ()

    def date(self) -> datetime:
        return parse_datetime(self._field("fecha"), "fecha")

    def xml(self) -> str | None:
        return self._optional("xml")

    def uuid(self) -> str:
        return self._field("uuid")

    def estatus_uuid(self) -> str:
        return self._field("estatus_uuid")

    def estatus_cancelacion(self) -> str:
        return self._field("estatus_cancelacion")


class CancelCfdiResultV3(ApiResult):
    """Cancelación v3: bloque `estatus` más bloque `cancelacion` opcional.

    Los accesores `cancelacion_*` devuelven None si el bloque no existe o
    el campo viene vacío.
    """

    __slots__ = ("_cancelacion", "_estatus")

    def __init__(self, response: Mapping[str, Any]) -> None:
        super().__init__(response)
        estatus = self._field("estatus")
        if not isinstance(estatus, Mapping):
            raise ProtocolError("Bloque 'estatus' inválido", reason="invalid_data")
        self._estatus = estatus
        cancelacion = self._optional("cancelacion")
        self._cancelacion = cancelacion if isinstance(cancelacion, Mapping) and cancelacion else None

    def _estatus_field(self, name: str) -> Any:
        if name not in self._estatus:
            raise ProtocolError(
                f"Respuesta sin campo 'estatus.{name}'",
                reason="missing_data",
            )
        return self._estatus[name]

    def _cancelacion_value(self, name: str) -> Any:
        if self._cancelacion is None:
            return None
        return self._cancelacion.get(name) or None

    def estatus_codigo(self) -> str:
        """Uno de: cancelado, en_proceso, no_cancelable,
        cancelable_con_aceptacion, cancelable_sin_aceptacion.
        """
        return self._estatus_field("codigo")

    def estatus_cancelado(self) -> bool:
        """Indica si el CFDI ya fue cancelado."""
        return bool(self._estatus_field("cancelado"))

    def estatus_solicitar(self) -> bool:
        """Indica si es posible solicitar la cancelación."""
        return bool(self._estatus_field("solicitar"))

    def cancelacion_fecha(self) -> datetime | None:
        value = self._cancelacion_value("fecha")
        if value is None:
            return None
        return parse_datetime(value, "cancelacion.fecha")

    def cancelacion_xml(self) -> str | None:
        """Acuse de cancelación, si la cancelación fue exitosa."""
        return self._cancelacion_value("xml")

    def cancelacion_uuid(self) -> str | None:
        return self._cancelacion_value("uuid")

    def cancelacion_estatus(self) -> str | None:
        return self._cancelacion_value("estatus_cancelacion")

    def cancelacion_estatus_uuid(self) -> str | None:
        return self._cancelacion_value("estatus_uuid")


CancelResult = CancelCfdiResult | CancelCfdiResultV2 | CancelCfdiResultV3

CANCEL_RESULT_TYPES: dict[CancelApiVersion, type[ApiResult]] = {
    CancelApiVersion.V1: CancelCfdiResult,
    CancelApiVersion.V2: CancelCfdiResultV2,
    CancelApiVersion.V3: CancelCfdiResultV3,
}


def cancel_result_for(
    version: CancelApiVersion,
    response: Mapping[str, Any],
) -> CancelResult:
    """Construye el resultado de cancelación de la versión indicada."""
    return CANCEL_RESULT_TYPES[CancelApiVersion(version)](response)
