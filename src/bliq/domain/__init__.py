"""Objetos de valor del dominio."""

from .cancel_version import CancelApiVersion
from .certificado import Certificado, CredentialSource, RegisteredCertificate
from .whatsapp_template import WhatsAppTemplate

__all__ = [
    "CancelApiVersion",
    "Certificado",
    "CredentialSource",
    "RegisteredCertificate",
    "WhatsAppTemplate",
]
