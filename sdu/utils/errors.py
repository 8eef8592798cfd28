# File: sdu/utils/errors.py
# Project: SvgDataUri (SDU)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Errores tipados del proyecto.
# Notes: main() captura SduError y devuelve exit code 1.
from __future__ import annotations


class SduError(Exception):
    """Error base del proyecto."""


class SduValidationError(SduError):
    """Error de validación (URI/XML/parámetros)."""


class SduEncodingError(SduError):
    """Falla del primitivo de codificación (UTF-8 / base64)."""


class SduIOError(SduError):
    """Error de E/S (lectura/escritura)."""


class SduRenderUnavailable(SduError):
    """QtSvg (PySide6) no se pudo cargar para el render check."""
