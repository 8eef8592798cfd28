# File: sdu/core/encoder.py
# Project: SvgDataUri (SDU)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: SVG (texto) -> base64 estándar -> data URI, y la inversa para verificación.
# Notes: base64 RFC 4648 con padding, siempre sobre los bytes UTF-8 del texto.
from __future__ import annotations

import base64
import binascii
import re
from dataclasses import dataclass

from sdu.core.payload import DEBUG_SVG
from sdu.core.version import SVG_MIME
from sdu.utils.errors import SduEncodingError, SduValidationError
from sdu.utils.log import get_logger

log = get_logger(__name__)

_DATA_URI_RE = re.compile(r"^data:(?P<mime>[^;,]+);base64,(?P<data>.*)$", re.DOTALL)


@dataclass(frozen=True)
class DataUriResult:
    svg: str
    b64: str
    uri: str
    mime: str = SVG_MIME


def encode_base64(text: str) -> str:
    """Base64 estándar (con `=`) de los bytes UTF-8 de `text`, como str ASCII."""
    try:
        raw = text.encode("utf-8")
    except UnicodeEncodeError as e:
        # Solo alcanzable con surrogates sueltos; el payload fijo nunca los tiene.
        raise SduEncodingError(f"Texto no codificable en UTF-8: {e}") from e
    return base64.b64encode(raw).decode("ascii")


def build_data_uri(b64: str, mime: str = SVG_MIME) -> str:
    return f"data:{mime};base64,{b64}"


def encode_svg(svg: str = DEBUG_SVG) -> DataUriResult:
    """Arma el resultado completo (texto, base64, URI) para imprimir."""
    b64 = encode_base64(svg)
    uri = build_data_uri(b64)
    log.info("SVG codificado: %d bytes -> %d chars base64", len(svg.encode("utf-8")), len(b64))
    return DataUriResult(svg=svg, b64=b64, uri=uri)


def decode_data_uri(uri: str) -> bytes:
    """Inversa de build_data_uri: devuelve los bytes originales.

    Solo acepta `data:<mime>;base64,<data>` con <data> no vacío y en forma
    canónica (lo que devolvería encode_base64). Rechaza con SduValidationError
    caracteres fuera del alfabeto, padding incorrecto y bits sobrantes no cero
    (p.ej. `Zm9=`).
    """
    m = _DATA_URI_RE.match(uri or "")
    if not m:
        raise SduValidationError("URI inválida (se esperaba data:<mime>;base64,<data>)")
    data = m.group("data")
    if not data:
        raise SduValidationError("URI sin payload base64")
    try:
        raw = base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError) as e:
        raise SduValidationError(f"Base64 inválido en la URI: {e}") from e
    if base64.b64encode(raw).decode("ascii") != data:
        raise SduValidationError("Base64 no canónico en la URI (bits de relleno no cero)")
    return raw


def expected_b64_length(n_bytes: int) -> int:
    """ceil(n/3)*4: largo del base64 con padding para n bytes."""
    if n_bytes < 0:
        raise SduValidationError(f"Cantidad de bytes negativa: {n_bytes}")
    return ((n_bytes + 2) // 3) * 4
