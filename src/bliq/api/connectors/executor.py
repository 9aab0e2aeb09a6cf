"""Ejecutor de peticiones compartido por los clientes de mensajería y timbrado.

Flujo por llamada (un solo intento, sin reintentos):
1. Arma la URL: base + endpoint + `?mode=` + modo (+ query en GET).
2. Agrega autenticación bearer; en POST serializa el cuerpo a JSON.
3. Invoca al colaborador HTTP.
4. Error de transporte -> TransportError (tiene prioridad sobre todo).
5. Cuerpo vacío o JSON inválido -> ProtocolError.
6. Envelope no exitoso -> ApplicationError.
7. Devuelve el envelope decodificado; los resultados tipados leen su `data`.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any
from urllib.parse import urlencode

from bliq.api.connectors.api_logging import log_request_failed, log_success
from bliq.api.connectors.envelope import assert_success, parse_response
from bliq.api.connectors.errors import (
    ApplicationError,
    ConfigurationError,
    ProtocolError,
    TransportError,
)

if TYPE_CHECKING:
    from bliq.api.connectors.profiles import ServiceProfile
    from bliq.config.settings import ApiMode
    from bliq.protocols.http_transport import HttpTransportProtocol, TransportResponse


METHOD_GET = "GET"
METHOD_POST = "POST"


def flatten_query(
    params: Mapping[str, Any],
    prefix: str | None = None,
) -> list[tuple[str, str]]:
    """Aplana parámetros anidados con la notación `a[b]=c`.

    Las listas usan índices (`ids[0]=1`), los booleanos se envían como
    `1`/`0` y los valores None se omiten.
    """
    pairs: list[tuple[str, str]] = []
    for key, value in params.items():
        name = f"{prefix}[{key}]" if prefix is not None else str(key)
        if value is None:
            continue
        if isinstance(value, Mapping):
            pairs.extend(flatten_query(value, name))
        elif isinstance(value, (list, tuple)):
            pairs.extend(flatten_query(dict(enumerate(value)), name))
        elif isinstance(value, bool):
            pairs.append((name, "1" if value else "0"))
        else:
            pairs.append((name, str(value)))
    return pairs


class RequestExecutor:
    """Construye, envía e interpreta peticiones hacia un servicio Bliq.

    El token y el modo se fijan al construir y no cambian después, por lo
    que una instancia puede compartirse entre hilos siempre que el
    transporte también lo permita.

    Args:
        profile: Servicio destino (URL base y regla de éxito).
        token: Credencial bearer; no puede estar vacía.
        mode: `dev` o `prod`.
        transport: Colaborador HTTP. Si es None se usa `HttpxTransport`.

    Raises:
        ConfigurationError: Si el token está vacío.
    """

    def __init__(
        self,
        profile: ServiceProfile,
        token: str,
        mode: ApiMode,
        transport: HttpTransportProtocol | None = None,
    ) -> None:
        if not token:
            raise ConfigurationError("El token no ha sido establecido.")
        if mode not in ("dev", "prod"):
            raise ConfigurationError(f"Modo inválido: {mode}")

        if transport is None:
            # Import local: el transporte httpx sólo se carga si se usa
            from bliq.infra.http import HttpxTransport

            transport = HttpxTransport()

        self._profile = profile
        self._token = token
        self._mode: ApiMode = mode
        self._transport = transport

    @property
    def profile(self) -> ServiceProfile:
        return self._profile

    @property
    def token(self) -> str:
        return self._token

    @property
    def mode(self) -> ApiMode:
        return self._mode

    def build_url(self, endpoint: str, params: dict[str, Any] | None = None) -> str:
        """Arma la URL final con el parámetro `mode` y el query opcional."""
        url = f"{self._profile.base_url}{endpoint}?mode={self._mode}"
        if params:
            url += "&" + urlencode(flatten_query(params))
        return url

    def get(self, endpoint: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        """Realiza una petición GET y devuelve el envelope exitoso."""
        url = self.build_url(endpoint, params)
        headers = {"Authorization": f"Bearer {self._token}"}
        return self._execute_request(METHOD_GET, endpoint, url, headers)

    def post(self, endpoint: str, data: Any = None) -> dict[str, Any]:
        """Realiza una petición POST con cuerpo JSON y devuelve el envelope exitoso."""
        url = self.build_url(endpoint)
        body = json.dumps(data, separators=(",", ":"))
        headers = {
            "Authorization": f"Bearer {self._token}",
            "Content-Type": "application/json",
            "Content-Length": str(len(body.encode("utf-8"))),
        }
        return self._execute_request(METHOD_POST, endpoint, url, headers, body)

    def execute(
        self,
        method: str,
        endpoint: str,
        payload: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Despacha por método HTTP.

        En GET el payload se envía como query; en POST como cuerpo JSON.
        """
        method_upper = method.upper()
        if method_upper == METHOD_GET:
            return self.get(endpoint, payload)
        if method_upper == METHOD_POST:
            return self.post(endpoint, payload)
        raise ConfigurationError(f"Método HTTP no soportado: {method}")

    def _execute_request(
        self,
        method: str,
        endpoint: str,
        url: str,
        headers: dict[str, str],
        body: str | None = None,
    ) -> dict[str, Any]:
        response = self._transport.request(method, url, headers, body)
        service = self._profile.name

        if response.error:
            log_request_failed(service, method, endpoint, "transport", response.status_code)
            raise TransportError(response.error)

        try:
            envelope = parse_response(response.body)
        except ProtocolError as exc:
            log_request_failed(service, method, endpoint, exc.reason, response.status_code)
            raise

        self._assert_is_success(method, endpoint, response, envelope)
        log_success(service, method, endpoint, response.status_code)
        return envelope

    def _assert_is_success(
        self,
        method: str,
        endpoint: str,
        response: TransportResponse,
        envelope: dict[str, Any],
    ) -> None:
        try:
            assert_success(self._profile.envelope, response.status_code, envelope)
        except ApplicationError:
            log_request_failed(
                self._profile.name,
                method,
                endpoint,
                "application",
                response.status_code,
            )
            raise
