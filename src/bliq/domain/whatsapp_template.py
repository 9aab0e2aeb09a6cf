"""Plantilla de WhatsApp aprobada, enviada por nombre e idioma."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class WhatsAppTemplate(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Nombre de la plantilla.")
    language: str = Field(..., min_length=1, description="Código de idioma (ej. es_MX).")
    components: list[dict[str, Any]] = Field(
        default_factory=list,
        description="Componentes con los parámetros de la plantilla.",
    )


__all__ = ["WhatsAppTemplate"]
