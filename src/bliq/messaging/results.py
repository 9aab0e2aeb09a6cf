"""Resultados tipados del servicio de mensajería."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from bliq.api.connectors.result_base import ApiResult

if TYPE_CHECKING:
    from collections.abc import Mapping


class SendResult(ApiResult):
    """Mensaje aceptado por el servicio."""

    __slots__ = ("_id", "_message", "_recipient")

    def __init__(self, response: Mapping[str, Any]) -> None:
        super().__init__(response)
        self._id = str(self._field("id"))
        self._message = self._field("message")
        self._recipient = self._field("recipient")

    def id(self) -> str:
        return self._id

    def message(self) -> str:
        return self._message

    def recipient(self) -> str:
        return self._recipient

    def __repr__(self) -> str:
        return f"SendResult(id={self._id!r})"
