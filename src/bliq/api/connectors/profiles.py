"""Perfiles de servicio: URL base + variante de envelope.

Un mismo ejecutor sirve a ambos servicios; lo que cambia entre ellos es
sólo el perfil.
"""

from __future__ import annotations

from dataclasses import dataclass

from bliq.api.connectors.envelope import EnvelopeVariant
from bliq.config.settings.base import MESSAGING_API_BASE_URL, STAMP_API_BASE_URL


@dataclass(frozen=True)
class ServiceProfile:
    """Configuración fija de un servicio remoto.

    Attributes:
        name: Nombre corto para logs.
        base_url: URL base; los endpoints se concatenan tal cual.
        envelope: Regla de éxito del envelope de respuesta.
    """

    name: str
    base_url: str
    envelope: EnvelopeVariant


MESSAGING_PROFILE = ServiceProfile(
    name="messaging",
    base_url=MESSAGING_API_BASE_URL,
    envelope=EnvelopeVariant.STATUS_CODE,
)

STAMP_PROFILE = ServiceProfile(
    name="stamp",
    base_url=STAMP_API_BASE_URL,
    envelope=EnvelopeVariant.SUCCESS_FLAG,
)

LEGACY_STAMP_PROFILE = ServiceProfile(
    name="stamp_legacy",
    base_url=STAMP_API_BASE_URL,
    envelope=EnvelopeVariant.STATUS_CODE,
)
