# File: sdu/svg/render_check.py
# Project: SvgDataUri (SDU)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Render check opt-in: data URI -> bytes -> QtSvg -> PNG (sin UI).
# Notes:
# - Reproduce lo que haría el navegador con la URI esperada.
# - Solo se importa si el usuario pasa --render (PySide6 es pesado).
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import sys

from PySide6.QtCore import QByteArray, QRectF, Qt
from PySide6.QtGui import QImage, QPainter
from PySide6.QtSvg import QSvgRenderer

from sdu.core.encoder import decode_data_uri
from sdu.utils.errors import SduIOError, SduValidationError
from sdu.utils.log import get_logger

log = get_logger(__name__)

_QT_APP = None  # referencia viva: si se libera, QPainter se queda sin fuentes


@dataclass(frozen=True)
class RenderCheck:
    out_png: Path
    size_px: int
    valid: bool
    alpha_nonzero: int
    alpha_bbox: tuple[int, int, int, int] | None

    @property
    def painted(self) -> bool:
        return self.valid and self.alpha_nonzero > 0


def _ensure_qt_app() -> None:
    """Crea una app Qt mínima si no existe (QPainter con texto necesita fuentes)."""
    from PySide6.QtGui import QGuiApplication

    global _QT_APP
    if QGuiApplication.instance() is None:
        _QT_APP = QGuiApplication(sys.argv[:1] or ["sdu-render-check"])


def _alpha_stats(img: QImage, *, threshold: int = 1) -> tuple[int, tuple[int, int, int, int] | None]:
    """(cantidad de pixeles con alpha>=threshold, bbox). Bbox como (x,y,w,h) o None."""
    if img.isNull():
        return 0, None

    if img.format() != QImage.Format.Format_ARGB32_Premultiplied:
        img = img.convertToFormat(QImage.Format.Format_ARGB32_Premultiplied)

    w = int(img.width())
    h = int(img.height())
    bpl = int(img.bytesPerLine())
    buf = bytes(img.constBits())[: bpl * h]

    nonzero = 0
    minx = miny = 10**9
    maxx = maxy = -1

    # ARGB32 premultiplied en little-endian: BGRA (A en offset 3)
    for y in range(h):
        row = buf[y * bpl : y * bpl + (w * 4)]
        for x in range(w):
            if row[x * 4 + 3] >= threshold:
                nonzero += 1
                minx = min(minx, x)
                miny = min(miny, y)
                maxx = max(maxx, x)
                maxy = max(maxy, y)

    if nonzero <= 0:
        return 0, None
    return nonzero, (minx, miny, maxx - minx + 1, maxy - miny + 1)


def render_data_uri(uri: str, out_png: str | Path, *, size_px: int = 256) -> RenderCheck:
    """Decodifica la URI, la rasteriza con QtSvg a size_px x size_px y guarda el PNG."""
    if size_px <= 0:
        raise SduValidationError(f"size_px debe ser > 0: {size_px}")

    data = decode_data_uri(uri)
    _ensure_qt_app()

    img = QImage(int(size_px), int(size_px), QImage.Format.Format_ARGB32_Premultiplied)
    img.fill(Qt.GlobalColor.transparent)

    r = QSvgRenderer(QByteArray(data))
    valid = bool(r.isValid())
    if valid:
        p = QPainter(img)
        p.setRenderHint(QPainter.RenderHint.Antialiasing, True)
        r.render(p, QRectF(0, 0, size_px, size_px))
        p.end()
    else:
        # Imagen vacía; se reporta como no pintada.
        log.warning("QtSvg no pudo cargar el SVG decodificado (%d bytes)", len(data))

    out = Path(out_png)
    try:
        out.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise SduIOError(f"No se pudo crear la carpeta de salida: {out.parent}") from e
    if not img.save(str(out)):
        raise SduIOError(f"No se pudo guardar PNG: {out}")

    nonzero, bbox = _alpha_stats(img)
    log.info("[render] %s: valid=%s alpha_nonzero=%d bbox=%s", out, valid, nonzero, bbox)
    return RenderCheck(out_png=out, size_px=int(size_px), valid=valid, alpha_nonzero=nonzero, alpha_bbox=bbox)
