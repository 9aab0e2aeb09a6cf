"""Cliente y resultados del servicio de mensajería."""

from .client import MessagingClient
from .results import SendResult

__all__ = ["MessagingClient", "SendResult"]
