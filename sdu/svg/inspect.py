# File: sdu/svg/inspect.py
# Project: SvgDataUri (SDU)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Inspección liviana del payload SVG antes de codificar.
# Notes: Solo valida raíz <svg> y lee width/height/viewBox; no normaliza.
from __future__ import annotations

from dataclasses import dataclass
import xml.etree.ElementTree as ET

from sdu.utils.errors import SduValidationError


@dataclass(frozen=True)
class SvgInspection:
    root_tag: str
    width: str | None
    height: str | None
    viewbox: str | None


def inspect_svg_text(text: str) -> SvgInspection:
    """Parsea el texto y verifica que la raíz sea <svg>."""
    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        raise SduValidationError(f"SVG inválido (XML malformado): {e}") from e

    if not _is_svg_root(root.tag):
        raise SduValidationError(f"El payload no parece SVG (root={root.tag!r})")

    return SvgInspection(
        root_tag=_strip_ns(root.tag),
        width=root.attrib.get("width"),
        height=root.attrib.get("height"),
        viewbox=root.attrib.get("viewBox"),
    )


def _is_svg_root(tag: str) -> bool:
    return tag == "svg" or tag.endswith("}svg")


def _strip_ns(tag: str) -> str:
    if "}" in tag:
        return tag.split("}", 1)[1]
    return tag
