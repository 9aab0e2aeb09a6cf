"""Builders de payload para el servicio de timbrado.

El contenido del comprobante es opaco para esta capa: se envía tal cual.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from bliq.api.connectors.errors import ConfigurationError
from bliq.api.payload_builders.credentials import CredentialStyle, credential_fields
from bliq.domain.cancel_version import CancelApiVersion

if TYPE_CHECKING:
    from bliq.domain.certificado import Certificado, CredentialSource

COMPROBANTE_KEY = "Comprobante"


def build_comprobante_payload(
    comprobante: dict[str, Any],
    credential: CredentialSource,
) -> dict[str, Any]:
    """Payload de `crear_xml` / `crear_cfdi` con su credencial."""
    return {
        COMPROBANTE_KEY: comprobante,
        **credential_fields(credential, CredentialStyle.FLAT),
    }


def build_pdf_payload(
    key: str,
    value: Any,
    params: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Payload de `crear_pdf`.

    Los parámetros extra se copian; la llave identificadora (`uuid`, `xml`
    o `Comprobante`) se asigna al final y prevalece.
    """
    payload = dict(params or {})
    payload[key] = value
    return payload


def _cancel_credential_style(version: CancelApiVersion) -> CredentialStyle:
    if version is CancelApiVersion.V1:
        return CredentialStyle.FLAT
    return CredentialStyle.NESTED


def build_cancel_payload(
    version: CancelApiVersion,
    uuid: str,
    motivo: str,
    folio_sustitucion: str,
    credential: CredentialSource,
    rfc_receptor: str | None = None,
    total: str | None = None,
) -> dict[str, Any]:
    """Payload de cancelación para la versión de endpoint indicada.

    Raises:
        ConfigurationError: Si es V3 y falta `rfc_receptor` o `total`.
    """
    payload: dict[str, Any] = {"uuid": uuid}

    if version is CancelApiVersion.V3:
        if not rfc_receptor or total is None or total == "":
            raise ConfigurationError(
                "La cancelación v3 requiere rfc_receptor y total."
            )
        payload["rfc_receptor"] = rfc_receptor
        payload["total"] = total

    payload["motivo"] = motivo
    payload["folio_sustitucion"] = folio_sustitucion
    payload.update(credential_fields(credential, _cancel_credential_style(version)))
    return payload


def build_status_payload(
    uuid: str,
    rfc_emisor: str,
    rfc_receptor: str,
    total: str,
) -> dict[str, Any]:
    return {
        "uuid": uuid,
        "rfc_emisor": rfc_emisor,
        "rfc_receptor": rfc_receptor,
        "total": total,
    }


def build_certificate_upload_payload(certificado: Certificado) -> dict[str, Any]:
    """Payload de `firmar_manifiesto` y `certificado_registrar` (archivos en base64)."""
    return credential_fields(certificado, CredentialStyle.BASE64)
