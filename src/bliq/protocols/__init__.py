"""Protocolos y contratos de la librería."""

from .http_transport import HttpTransportProtocol, TransportResponse

__all__ = [
    "HttpTransportProtocol",
    "TransportResponse",
]
