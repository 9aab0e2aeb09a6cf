"""Fuentes de credencial para operaciones que requieren firma.

Una operación con certificado acepta exactamente una de dos fuentes:
- `Certificado`: archivos .cer/.key crudos más la contraseña de la llave.
- `RegisteredCertificate`: un certificado registrado previamente en el
  servicio, identificado por número de certificado y RFC.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Certificado(BaseModel):
    """Credencial CSD con el contenido crudo de los archivos."""

    model_config = ConfigDict(frozen=True)

    cer: bytes = Field(..., description="Contenido crudo del archivo .cer.")
    key: bytes = Field(..., description="Contenido crudo del archivo .key.")
    passphrase: str | None = Field(
        default=None,
        description="Contraseña de la llave privada.",
    )

    def __repr__(self) -> str:
        # Nunca exponer el material de la llave ni la contraseña
        return f"Certificado(cer=<{len(self.cer)} bytes>, key=<{len(self.key)} bytes>)"

    __str__ = __repr__


class RegisteredCertificate(BaseModel):
    """Referencia a un certificado ya registrado en el servicio de timbrado."""

    model_config = ConfigDict(frozen=True)

    numero: str = Field(..., min_length=1, description="Número de certificado.")
    rfc: str = Field(..., min_length=1, description="RFC del titular.")


CredentialSource = Certificado | RegisteredCertificate


__all__ = ["Certificado", "CredentialSource", "RegisteredCertificate"]
