# File: sdu/app.py
# Project: SvgDataUri (SDU)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Entry-point: imprime SVG, base64 y URI esperada del payload fijo.
# Notes: stdout = exactamente tres líneas; todo lo demás va a stderr (logging).
from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from sdu.core.encoder import encode_svg
from sdu.core.payload import DEBUG_SVG
from sdu.core.report import print_report
from sdu.core.settings import (
    ENV_LOG_DIR,
    ENV_LOG_LEVEL,
    RENDER_SIZE_RANGE,
    apply_project_settings,
    coerce_render_size,
    render_size_from_env,
)
from sdu.core.version import APP_SHORT, APP_VERSION
from sdu.svg.inspect import inspect_svg_text
from sdu.utils.errors import SduError, SduRenderUnavailable
from sdu.utils.log import get_logger, level_from_name, setup_logging

log = get_logger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="sdu-debug-uri",
        description="SDU — imprime el SVG de debug, su base64 y la data URI esperada.",
    )
    ap.add_argument("-v", "--verbose", action="count", default=0, help="-v = INFO, -vv = DEBUG (a stderr)")
    ap.add_argument("--render", default="", help="Ruta PNG opcional: decodifica la URI y la rasteriza con QtSvg")
    ap.add_argument("--size", type=int, default=None, help="Tamaño del render en px, clamp a 16..1024 (default: SDU_RENDER_SIZE o 256)")
    ap.add_argument("--version", action="version", version=f"{APP_SHORT} {APP_VERSION}")
    return ap


def _resolve_level(verbose: int) -> int:
    if verbose >= 2:
        return logging.DEBUG
    if verbose == 1:
        return logging.INFO
    return level_from_name(os.environ.get(ENV_LOG_LEVEL))


def _run_render_check(uri: str, out_png: Path, *, size_px: int) -> None:
    try:
        from sdu.svg.render_check import render_data_uri  # import perezoso (PySide6)
    except ImportError as e:
        raise SduRenderUnavailable(f"Render check requiere PySide6: {e}") from e

    rc = render_data_uri(uri, out_png, size_px=size_px)
    status = "OK" if rc.painted else "VACIO"
    print(f"[{APP_SHORT}] render {status}: {rc.out_png} ({rc.size_px}px, alpha_nonzero={rc.alpha_nonzero})", file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    # Project-level defaults (repo-local): sdu_settings.json
    apply_project_settings(logger=log, prefer_env=True)
    setup_logging(log_dir=os.environ.get(ENV_LOG_DIR) or None, level=_resolve_level(args.verbose))
    log.debug("%s v%s", APP_SHORT, APP_VERSION)

    try:
        info = inspect_svg_text(DEBUG_SVG)
        log.debug("Payload: <%s> width=%s height=%s viewBox=%s", info.root_tag, info.width, info.height, info.viewbox)

        result = encode_svg(DEBUG_SVG)
        print_report(result)

        if args.render:
            if args.size is None:
                size = render_size_from_env()
            else:
                size = coerce_render_size(args.size)
                if size != args.size:
                    log.warning("--size %d fuera de rango %s, se usa %d", args.size, RENDER_SIZE_RANGE, size)
            _run_render_check(result.uri, Path(args.render).expanduser(), size_px=size)
    except SduError as e:
        log.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
