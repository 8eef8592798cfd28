# File: sdu/core/payload.py
# Project: SvgDataUri (SDU)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Payload SVG fijo del debug (texto literal, no configurable).
# Notes: Cambiarlo rompe la comparación con la URI esperada en el navegador.
from __future__ import annotations

DEBUG_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink" '
    'width="500" height="500">'
    '<text x="0" y="15" fill="black">Hi! Your browser decoded this</text>'
    "</svg>"
)
