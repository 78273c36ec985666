"""
Configuración de logging para HidroCanal.

Los módulos del núcleo usan ``logging.getLogger(__name__)`` y no agregan
handlers. La CLI llama a ``configure_logging()`` para enviar los mensajes del
logger ``hidrocanal`` a la consola (via rich) y opcionalmente a un archivo, y a
``teardown_logging()`` para quitar solo los handlers que agregó.
"""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "hidrocanal"

# Atributo marcador de los handlers creados aquí.
_HANDLER_TAG = "_hidrocanal_handler"

_original_level: int | None = None


def configure_logging(
    level: int = logging.WARNING,
    log_file: str | Path | None = None,
    file_level: int = logging.DEBUG,
    console: Console | None = None,
) -> logging.Logger:
    """
    Agrega handlers de consola (y archivo, opcional) al logger del paquete.

    Idempotente: una segunda llamada reemplaza los handlers anteriores.

    Args:
        level: Nivel del handler de consola
        log_file: Ruta de archivo de log (se crea el directorio si no existe)
        file_level: Nivel del handler de archivo
        console: Consola rich de destino (por defecto stderr)

    Returns:
        Logger ``hidrocanal``
    """
    global _original_level

    logger = logging.getLogger(PACKAGE_LOGGER)
    _remove_tagged_handlers(logger)

    if _original_level is None:
        _original_level = logger.level

    console_handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=False,
    )
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    setattr(console_handler, _HANDLER_TAG, True)
    logger.addHandler(console_handler)

    effective = level
    if log_file is not None:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, mode="w", encoding="utf-8")
        file_handler.setLevel(file_level)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(name)s %(levelname)s %(message)s")
        )
        setattr(file_handler, _HANDLER_TAG, True)
        logger.addHandler(file_handler)
        effective = min(level, file_level)

    logger.setLevel(effective)
    return logger


def teardown_logging() -> None:
    """Quita los handlers agregados y restaura el nivel original."""
    global _original_level

    logger = logging.getLogger(PACKAGE_LOGGER)
    _remove_tagged_handlers(logger)

    if _original_level is not None:
        logger.setLevel(_original_level)
        _original_level = None


def _remove_tagged_handlers(logger: logging.Logger) -> None:
    """Quita los handlers que llevan la marca ``_hidrocanal_handler``."""
    for handler in logger.handlers[:]:
        if getattr(handler, _HANDLER_TAG, False):
            logger.removeHandler(handler)
            handler.close()
