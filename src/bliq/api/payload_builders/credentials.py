"""Campos de credencial para los payloads del servicio de timbrado.

Cada endpoint espera la credencial con una forma distinta:

| Estilo   | Certificado (archivos)                         | Registrado                        |
|----------|------------------------------------------------|-----------------------------------|
| FLAT     | `cer_data`, `key_data`, `key_passphrase`       | `certificado: {numero, rfc}`      |
| NESTED   | `certificado: {cer, key, pwd}`                 | `certificado: {numero, rfc}`      |
| BASE64   | `cer_data`, `key_data` en base64 + passphrase  | no aplica                         |
"""

from __future__ import annotations

import base64
from enum import Enum
from typing import Any

from bliq.api.connectors.errors import ConfigurationError
from bliq.domain.certificado import Certificado, RegisteredCertificate


class CredentialStyle(str, Enum):
    FLAT = "flat"
    NESTED = "nested"
    BASE64 = "base64"


def _as_text(raw: bytes, field: str) -> str:
    """El contenido crudo viaja como texto JSON; debe ser UTF-8 (p. ej. PEM)."""
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ConfigurationError(
            f"El contenido de '{field}' no es texto UTF-8; "
            "codifíquelo (p. ej. base64 o PEM) antes de enviarlo."
        ) from exc


def _as_base64(raw: bytes) -> str:
    return base64.b64encode(raw).decode("ascii")


def registered_certificate_fields(credential: RegisteredCertificate) -> dict[str, Any]:
    return {
        "certificado": {
            "numero": credential.numero,
            "rfc": credential.rfc,
        }
    }


def certificate_file_fields(
    certificado: Certificado,
    style: CredentialStyle,
) -> dict[str, Any]:
    """Campos para un certificado entregado como archivos."""
    if style is CredentialStyle.BASE64:
        return {
            "cer_data": _as_base64(certificado.cer),
            "key_data": _as_base64(certificado.key),
            "key_passphrase": certificado.passphrase,
        }
    if style is CredentialStyle.NESTED:
        return {
            "certificado": {
                "cer": _as_text(certificado.cer, "cer"),
                "key": _as_text(certificado.key, "key"),
                "pwd": certificado.passphrase,
            }
        }
    return {
        "cer_data": _as_text(certificado.cer, "cer_data"),
        "key_data": _as_text(certificado.key, "key_data"),
        "key_passphrase": certificado.passphrase,
    }


def credential_fields(
    credential: Certificado | RegisteredCertificate,
    style: CredentialStyle = CredentialStyle.FLAT,
) -> dict[str, Any]:
    """Campos de credencial según la fuente elegida por el llamador.

    Raises:
        ConfigurationError: Si la fuente no es un `Certificado` ni un
            `RegisteredCertificate`.
    """
    if isinstance(credential, RegisteredCertificate):
        return registered_certificate_fields(credential)
    if isinstance(credential, Certificado):
        return certificate_file_fields(credential, style)
    raise ConfigurationError(
        "La credencial debe ser un Certificado o un RegisteredCertificate, "
        f"no {type(credential).__name__}."
    )
