"""Clientes de las APIs Bliq: mensajería (SMS/WhatsApp) y timbrado de CFDI.

Uso:
    from bliq import Certificado, MessagingClient, StampClient

    sms = MessagingClient(token, dev_mode=True).send_sms("+5215500000000", "hola")
    cfdi = StampClient(token).create_cfdi(comprobante, Certificado(cer=..., key=...))
"""

from bliq.api.connectors import (
    LEGACY_STAMP_PROFILE,
    MESSAGING_PROFILE,
    STAMP_PROFILE,
    ApplicationError,
    BliqApiError,
    ConfigurationError,
    EnvelopeVariant,
    ProtocolError,
    RequestExecutor,
    ServiceProfile,
    TransportError,
)
from bliq.config.logging import install_null_handler
from bliq.domain import (
    CancelApiVersion,
    Certificado,
    CredentialSource,
    RegisteredCertificate,
    WhatsAppTemplate,
)
from bliq.messaging import MessagingClient, SendResult
from bliq.protocols import HttpTransportProtocol, TransportResponse
from bliq.stamp import (
    CancelCfdiResult,
    CancelCfdiResultV2,
    CancelCfdiResultV3,
    CreateCfdiResult,
    CreatePdfResult,
    FetchCfdiResult,
    StampClient,
    StatusCfdiResult,
)

install_null_handler()

__version__ = "1.0.0"

__all__ = [
    "LEGACY_STAMP_PROFILE",
    "MESSAGING_PROFILE",
    "STAMP_PROFILE",
    "ApplicationError",
    "BliqApiError",
    "CancelApiVersion",
    "CancelCfdiResult",
    "CancelCfdiResultV2",
    "CancelCfdiResultV3",
    "Certificado",
    "ConfigurationError",
    "CreateCfdiResult",
    "CreatePdfResult",
    "CredentialSource",
    "EnvelopeVariant",
    "FetchCfdiResult",
    "HttpTransportProtocol",
    "MessagingClient",
    "ProtocolError",
    "RegisteredCertificate",
    "RequestExecutor",
    "SendResult",
    "ServiceProfile",
    "StampClient",
    "StatusCfdiResult",
    "TransportError",
    "TransportResponse",
    "WhatsAppTemplate",
]
