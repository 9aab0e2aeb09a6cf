"""Builders de payload para los servicios de mensajería y timbrado."""

from bliq.api.payload_builders.credentials import CredentialStyle, credential_fields
from bliq.api.payload_builders.messaging import (
    build_message_payload,
    build_template_payload,
)
from bliq.api.payload_builders.stamp import (
    build_cancel_payload,
    build_certificate_upload_payload,
    build_comprobante_payload,
    build_pdf_payload,
    build_status_payload,
)

__all__ = [
    "CredentialStyle",
    "build_cancel_payload",
    "build_certificate_upload_payload",
    "build_comprobante_payload",
    "build_message_payload",
    "build_pdf_payload",
    "build_status_payload",
    "build_template_payload",
    "credential_fields",
]
