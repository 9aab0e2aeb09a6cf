"""Implementaciones concretas del colaborador HTTP."""

from .httpx_transport import HttpxTransport

__all__ = ["HttpxTransport"]
