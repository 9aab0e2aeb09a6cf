"""Settings del colaborador HTTP.

Sólo afinan el transporte (timeout, verificación TLS, headers extra).
El token y el modo nunca se leen del entorno: los entrega la aplicación
al construir el cliente.
"""

from __future__ import annotations

import os
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field

from bliq.api.connectors.errors import ConfigurationError


class HttpSettings(BaseModel):
    """Configuración del transporte HTTP usado por los clientes."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout por petición (segundos), aplicado por el transporte.",
    )
    verify_ssl: bool = Field(
        default=True,
        description="Verificar certificados TLS del servidor.",
    )
    default_headers: dict[str, str] = Field(
        default_factory=dict,
        description="Headers adicionales; los de la petición tienen prioridad.",
    )


def _read_bool_env(key: str, default: bool) -> bool:
    raw = os.getenv(key)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _load_from_env() -> HttpSettings:
    """Carga HttpSettings a partir de variables de entorno.

    Raises:
        ConfigurationError: Si `BLIQ_HTTP_TIMEOUT_SECONDS` no es un número
            positivo.
    """
    raw_timeout = os.getenv("BLIQ_HTTP_TIMEOUT_SECONDS", "30")
    try:
        return HttpSettings(
            timeout_seconds=float(raw_timeout),
            verify_ssl=_read_bool_env("BLIQ_HTTP_VERIFY_SSL", True),
        )
    except ValueError as exc:
        # pydantic.ValidationError también es un ValueError
        raise ConfigurationError(
            f"BLIQ_HTTP_TIMEOUT_SECONDS inválido: {raw_timeout!r}"
        ) from exc


@lru_cache(maxsize=1)
def get_http_settings() -> HttpSettings:
    """Devuelve la instancia cacheada de HttpSettings."""
    return _load_from_env()
