"""Settings base compartidos por los clientes de mensajería y timbrado."""

from __future__ import annotations

from typing import Literal

# Bandera de ruteo del lado del servidor (sandbox vs. producción).
# No cambia la URL base, sólo el parámetro `mode` de cada petición.
ApiMode = Literal["dev", "prod"]

MESSAGING_API_BASE_URL: str = "https://api.bliq.mx/messaging/"
STAMP_API_BASE_URL: str = "https://api.reeply.mx/timbrado/"


def mode_from_flag(dev_mode: bool) -> ApiMode:
    """Convierte la bandera booleana del constructor en el modo de la API."""
    return "dev" if dev_mode else "prod"
