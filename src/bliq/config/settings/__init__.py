"""Agregador de settings de la librería."""

from __future__ import annotations

from bliq.config.settings.base import (
    MESSAGING_API_BASE_URL,
    STAMP_API_BASE_URL,
    ApiMode,
    mode_from_flag,
)
from bliq.config.settings.http import HttpSettings, get_http_settings

__all__ = [
    "MESSAGING_API_BASE_URL",
    "STAMP_API_BASE_URL",
    "ApiMode",
    "HttpSettings",
    "get_http_settings",
    "mode_from_flag",
]
