# File: sdu/utils/log.py
# Project: SvgDataUri (SDU)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Logging centralizado (stderr + archivo opcional) y helpers.
# Notes: stdout queda reservado para las tres líneas del reporte.
from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

LOG_FILE_NAME = "sdu.log"

_LOGGER_CONFIGURED = False
_HANDLERS: list[logging.Handler] = []


def setup_logging(log_dir: str | os.PathLike | None = None, level: int = logging.WARNING) -> None:
    """Configura logging en consola (stderr) + archivo si hay `log_dir`.

    Nota:
        - Nunca escribe en stdout.
        - No lanza excepción si no puede escribir el archivo; cae a consola.
    """
    global _LOGGER_CONFIGURED
    if _LOGGER_CONFIGURED:
        return

    logger = logging.getLogger()
    logger.setLevel(level)

    fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Consola
    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(level)
    ch.setFormatter(fmt)
    logger.addHandler(ch)
    _HANDLERS.append(ch)

    # Archivo (opt-in)
    if log_dir:
        try:
            d = Path(log_dir)
            d.mkdir(parents=True, exist_ok=True)
            fh = logging.FileHandler(d / LOG_FILE_NAME, encoding="utf-8")
            fh.setLevel(level)
            fh.setFormatter(fmt)
            logger.addHandler(fh)
            _HANDLERS.append(fh)
        except Exception as e:
            logging.getLogger(__name__).warning("No se pudo inicializar FileHandler: %s", e)

    _LOGGER_CONFIGURED = True


def reset_logging() -> None:
    """Quita los handlers agregados por setup_logging (tests / re-ejecución en el mismo proceso)."""
    global _LOGGER_CONFIGURED
    root = logging.getLogger()
    while _HANDLERS:
        h = _HANDLERS.pop()
        root.removeHandler(h)
        h.close()
    _LOGGER_CONFIGURED = False


def level_from_name(name: str | None, default: int = logging.WARNING) -> int:
    s = str(name or "").strip().upper()
    if s in ("DEBUG", "INFO", "WARNING", "ERROR"):
        return getattr(logging, s)
    return default


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
