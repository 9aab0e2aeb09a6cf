"""Builders de payload para el servicio de mensajería."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Literal

if TYPE_CHECKING:
    from bliq.domain.whatsapp_template import WhatsAppTemplate

MessageType = Literal["SMS", "WhatsApp", "WhatsAppTemplate"]


def build_message_payload(
    message_type: MessageType,
    number: str,
    message: str,
    token: str,
) -> dict[str, Any]:
    """Payload genérico de envío, discriminado por `type`."""
    return {
        "type": message_type,
        "number": number,
        "message": message,
        "token": token,
    }


def build_template_payload(
    number: str,
    template: WhatsAppTemplate,
    token: str,
) -> dict[str, Any]:
    return {
        "type": "WhatsAppTemplate",
        "number": number,
        "template": {
            "name": template.name,
            "language": template.language,
            "components": list(template.components),
        },
        "token": token,
    }
