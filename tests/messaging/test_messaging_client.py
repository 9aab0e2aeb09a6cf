"""Pruebas del cliente de mensajería."""

from __future__ import annotations

import json
from concurrent.futures import ThreadPoolExecutor

import pytest

from bliq.api.connectors.errors import ApplicationError, ConfigurationError
from bliq.domain import WhatsAppTemplate
from bliq.messaging import MessagingClient, SendResult
from tests.fakes.fake_http_transport import FakeHttpTransport, json_response

SEND_OK = {"data": {"id": 1, "message": "hola", "recipient": "+5215500000000"}}


def test_empty_token_fails() -> None:
    with pytest.raises(ConfigurationError, match="token"):
        MessagingClient("")


def test_send_sms_end_to_end(token: str) -> None:
    transport = FakeHttpTransport(json_response({"data": {"id": "1", "message": "hola", "recipient": "+5215500000000"}}))
    client = MessagingClient(token, transport=transport)

    result = client.send_sms("+5215500000000", "hola")

    request = transport.last_request
    assert request.method == "POST"
    assert request.url == "https://api.bliq.mx/messaging/send?mode=prod"
    assert request.body == (
        '{"type":"SMS","number":"+5215500000000","message":"hola","token":"tok-123"}'
    )
    assert isinstance(result, SendResult)
    assert result.id() == "1"
    assert result.message() == "hola"
    assert result.recipient() == "+5215500000000"


def test_send_whatsapp_message_uses_type_discriminator(token: str) -> None:
    transport = FakeHttpTransport(json_response(SEND_OK))
    MessagingClient(token, dev_mode=True, transport=transport).send_whatsapp_message(
        "+5215500000000", "hola"
    )
    assert transport.last_request.json()["type"] == "WhatsApp"
    assert transport.last_request.url.endswith("send?mode=dev")


def test_send_whatsapp_template(token: str) -> None:
    transport = FakeHttpTransport(json_response(SEND_OK))
    client = MessagingClient(token, transport=transport)
    client.send_whatsapp_template("+5215500000000", WhatsAppTemplate(name="bienvenida", language="es_MX"))
    body = transport.last_request.json()
    assert body["type"] == "WhatsAppTemplate"
    assert body["template"]["name"] == "bienvenida"


def test_numeric_id_is_stringified(token: str) -> None:
    transport = FakeHttpTransport(json_response(SEND_OK))
    result = MessagingClient(token, transport=transport).send_sms("+5215500000000", "hola")
    assert result.id() == "1"


def test_non_2xx_raises_application_error(token: str) -> None:
    transport = FakeHttpTransport(
        json_response({"error": {"message": "Número no válido"}}, status_code=422)
    )
    with pytest.raises(ApplicationError, match="Número no válido"):
        MessagingClient(token, transport=transport).send_sms("123", "hola")


def test_mode_follows_flag(token: str) -> None:
    assert MessagingClient(token, transport=FakeHttpTransport()).mode == "prod"
    assert MessagingClient(token, dev_mode=True, transport=FakeHttpTransport()).mode == "dev"


def test_raw_get_keeps_mode(token: str) -> None:
    transport = FakeHttpTransport(json_response({"data": []}))
    MessagingClient(token, dev_mode=True, transport=transport).get("messages", {"page": 1})
    assert transport.last_request.url == "https://api.bliq.mx/messaging/messages?mode=dev&page=1"


class _EchoTransport(FakeHttpTransport):
    """Responde con el número y mensaje de cada petición."""

    def request(self, method, url, headers, body=None):
        super().request(method, url, headers, body)
        sent = json.loads(body)
        return json_response(
            {"data": {"id": sent["number"][-4:], "message": sent["message"], "recipient": sent["number"]}}
        )


def test_shared_client_across_threads(token: str) -> None:
    transport = _EchoTransport()
    client = MessagingClient(token, transport=transport)
    numbers = [f"+52155000{i:05d}" for i in range(40)]

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda n: client.send_sms(n, f"hola {n}"), numbers))

    assert [r.recipient() for r in results] == numbers
    assert [r.message() for r in results] == [f"hola {n}" for n in numbers]
    assert len(transport.requests) == len(numbers)
    assert all(req.json()["token"] == token for req in transport.requests)
    assert {req.url for req in transport.requests} == {"https://api.bliq.mx/messaging/send?mode=prod"}
