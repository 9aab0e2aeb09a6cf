"""Cliente del servicio de mensajería (SMS / WhatsApp)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from bliq.api.connectors.executor import RequestExecutor
from bliq.api.connectors.profiles import MESSAGING_PROFILE, ServiceProfile
from bliq.api.payload_builders.messaging import (
    build_message_payload,
    build_template_payload,
)
from bliq.config.settings import mode_from_flag
from bliq.messaging.results import SendResult

if TYPE_CHECKING:
    from bliq.config.settings import ApiMode
    from bliq.domain.whatsapp_template import WhatsAppTemplate
    from bliq.protocols.http_transport import HttpTransportProtocol

SEND_ENDPOINT = "send"


class MessagingClient:
    """Envía SMS y mensajes de WhatsApp.

    Args:
        token: Token de acceso a la API.
        dev_mode: Si es True las peticiones van con `mode=dev`.
        transport: Colaborador HTTP opcional (por defecto httpx).
        profile: Perfil del servicio; permite apuntar a otra URL base.

    Raises:
        ConfigurationError: Si el token está vacío.
    """

    def __init__(
        self,
        token: str,
        dev_mode: bool = False,
        *,
        transport: HttpTransportProtocol | None = None,
        profile: ServiceProfile = MESSAGING_PROFILE,
    ) -> None:
        self._executor = RequestExecutor(profile, token, mode_from_flag(dev_mode), transport)

    @property
    def mode(self) -> ApiMode:
        return self._executor.mode

    def send_sms(self, number: str, message: str) -> SendResult:
        """Envía un SMS."""
        return self.send_message(
            build_message_payload("SMS", number, message, self._executor.token)
        )

    def send_whatsapp_message(self, number: str, message: str) -> SendResult:
        """Envía un mensaje de texto por WhatsApp."""
        return self.send_message(
            build_message_payload("WhatsApp", number, message, self._executor.token)
        )

    def send_whatsapp_template(self, number: str, template: WhatsAppTemplate) -> SendResult:
        """Envía una plantilla de WhatsApp aprobada."""
        return self.send_message(
            build_template_payload(number, template, self._executor.token)
        )

    def send_message(self, data: dict[str, Any]) -> SendResult:
        """Envía un mensaje con el payload ya armado (discriminado por `type`)."""
        response = self._executor.post(SEND_ENDPOINT, data)
        return SendResult(response)

    def get(self, endpoint: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        return self._executor.get(endpoint, params)

    def post(self, endpoint: str, data: Any = None) -> dict[str, Any]:
        return self._executor.post(endpoint, data)
