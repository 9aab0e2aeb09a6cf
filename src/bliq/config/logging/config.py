"""Logging de la librería bajo el logger `bliq`.

Al importar `bliq` se registra un `NullHandler` en el logger `bliq`, de
modo que la librería no emite nada hasta que la aplicación lo decida.
`configure_logging` es opcional: agrega un handler JSON sólo al logger
`bliq` y nunca toca el logger raíz ni los handlers de la aplicación.

Uso:
    from bliq.config.logging import configure_logging

    configure_logging(level="DEBUG", service_name="facturacion")
"""

from __future__ import annotations

import logging
from typing import IO, TYPE_CHECKING

from bliq.config.logging.filters import BliqContextFilter
from bliq.config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

LIBRARY_LOGGER_NAME = "bliq"

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "bliq_api"

# Marca los handlers instalados por configure_logging
_OWNED_HANDLER_ATTR = "_bliq_owned"


def install_null_handler() -> None:
    """Registra un único `NullHandler` en el logger de la librería."""
    logger = logging.getLogger(LIBRARY_LOGGER_NAME)
    if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
        logger.addHandler(logging.NullHandler())


def _owned_handlers(logger: logging.Logger) -> list[logging.Handler]:
    return [h for h in logger.handlers if getattr(h, _OWNED_HANDLER_ATTR, False)]


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
    *,
    stream: IO[str] | None = None,
    propagate: bool = False,
) -> logging.Handler:
    """Emite los registros de `bliq.*` como JSON.

    Llamadas repetidas reemplazan el handler anterior de esta función;
    los handlers agregados por la aplicación se conservan.

    Args:
        level: Nivel de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Valor del campo `service` en cada registro.
        correlation_id_getter: Función opcional que devuelve el
            correlation_id del contexto actual.
        stream: Destino del handler (stderr por defecto).
        propagate: Si los registros también suben al logger raíz.

    Returns:
        El handler instalado.

    Raises:
        ValueError: Si el nivel de log no es válido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nivel de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler(stream)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(BliqContextFilter(service_name, correlation_id_getter))
    setattr(handler, _OWNED_HANDLER_ATTR, True)

    logger = logging.getLogger(LIBRARY_LOGGER_NAME)
    for previous in _owned_handlers(logger):
        logger.removeHandler(previous)
    logger.addHandler(handler)
    logger.setLevel(level_upper)
    logger.propagate = propagate
    return handler


def reset_logging() -> None:
    """Quita lo instalado por `configure_logging` y restaura los defaults."""
    logger = logging.getLogger(LIBRARY_LOGGER_NAME)
    for handler in _owned_handlers(logger):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


def get_logger(name: str) -> logging.Logger:
    """Devuelve un logger dentro de la jerarquía `bliq`."""
    if name != LIBRARY_LOGGER_NAME and not name.startswith(f"{LIBRARY_LOGGER_NAME}."):
        name = f"{LIBRARY_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
