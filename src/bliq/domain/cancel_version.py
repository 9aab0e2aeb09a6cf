"""Generaciones del endpoint de cancelación de CFDI."""

from __future__ import annotations

from enum import Enum


class CancelApiVersion(str, Enum):
    """Versión del endpoint de cancelación.

    - V1: respuesta plana (fecha de cancelación y acuse).
    - V2: agrega estatus del UUID y de la cancelación.
    - V3: bloque `estatus` más bloque `cancelacion` opcional; requiere
      además RFC receptor y total.
    """

    V1 = "v1"
    V2 = "v2"
    V3 = "v3"

    @property
    def endpoint(self) -> str:
        if self is CancelApiVersion.V1:
            return "cancelar_cfdi"
        return f"cancelar_cfdi_{self.value}"


__all__ = ["CancelApiVersion"]
