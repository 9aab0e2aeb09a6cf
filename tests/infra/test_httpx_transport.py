"""Pruebas del transporte httpx usando `httpx.MockTransport`."""

from __future__ import annotations

import httpx
import pytest

from bliq.api.connectors.errors import TransportError
from bliq.config.settings import HttpSettings
from bliq.infra.http import HttpxTransport
from bliq.messaging import MessagingClient


def test_returns_status_and_body() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(201, text='{"data": {}}')

    transport = HttpxTransport(HttpSettings(), transport=httpx.MockTransport(handler))
    response = transport.request(
        "POST",
        "https://api.example.test/send?mode=dev",
        {"Authorization": "Bearer t", "Content-Type": "application/json"},
        '{"a":1}',
    )

    assert response.status_code == 201
    assert response.body == '{"data": {}}'
    assert response.error is None
    assert seen[0].content == b'{"a":1}'
    assert seen[0].headers["Authorization"] == "Bearer t"


def test_non_2xx_is_not_a_transport_error() -> None:
    transport = HttpxTransport(
        HttpSettings(),
        transport=httpx.MockTransport(lambda request: httpx.Response(500, text="boom")),
    )
    response = transport.request("GET", "https://api.example.test/x", {})
    assert response.status_code == 500
    assert response.error is None


def test_network_failure_is_reported_not_raised() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    transport = HttpxTransport(HttpSettings(), transport=httpx.MockTransport(handler))
    response = transport.request("GET", "https://api.example.test/x", {})

    assert response.error == "Connection refused"
    assert response.status_code is None
    assert response.body is None


def test_default_headers_are_merged_with_request_priority() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, text="{}")

    settings = HttpSettings(default_headers={"X-Client": "bliq", "Authorization": "old"})
    HttpxTransport(settings, transport=httpx.MockTransport(handler)).request(
        "GET", "https://api.example.test/x", {"Authorization": "Bearer new"}
    )
    assert seen[0].headers["X-Client"] == "bliq"
    assert seen[0].headers["Authorization"] == "Bearer new"


def test_client_surfaces_transport_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    transport = HttpxTransport(HttpSettings(timeout_seconds=1), transport=httpx.MockTransport(handler))
    client = MessagingClient("tok", transport=transport)
    with pytest.raises(TransportError, match="timed out"):
        client.send_sms("+5215500000000", "hola")


def test_client_end_to_end_over_httpx() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            200,
            json={"data": {"id": 7, "message": "hola", "recipient": "+5215500000000"}},
        )

    client = MessagingClient(
        "tok",
        dev_mode=True,
        transport=HttpxTransport(HttpSettings(), transport=httpx.MockTransport(handler)),
    )
    result = client.send_sms("+5215500000000", "hola")

    assert result.id() == "7"
    assert str(seen[0].url) == "https://api.bliq.mx/messaging/send?mode=dev"
    assert seen[0].headers["Content-Length"] == str(len(seen[0].content))
