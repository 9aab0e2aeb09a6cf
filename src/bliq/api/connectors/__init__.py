"""Conectores: ejecutor de peticiones, envelope y errores.

Este paquete es el único punto que habla con el colaborador HTTP.
"""

from .envelope import EnvelopeVariant, assert_success, parse_response
from .errors import (
    ApplicationError,
    BliqApiError,
    ConfigurationError,
    ProtocolError,
    TransportError,
)
from .executor import RequestExecutor
from .profiles import (
    LEGACY_STAMP_PROFILE,
    MESSAGING_PROFILE,
    STAMP_PROFILE,
    ServiceProfile,
)

__all__ = [
    "LEGACY_STAMP_PROFILE",
    "MESSAGING_PROFILE",
    "STAMP_PROFILE",
    "ApplicationError",
    "BliqApiError",
    "ConfigurationError",
    "EnvelopeVariant",
    "ProtocolError",
    "RequestExecutor",
    "ServiceProfile",
    "TransportError",
    "assert_success",
    "parse_response",
]
