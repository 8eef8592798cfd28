# File: sdu/core/settings.py
# Project: SvgDataUri (SDU)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Project settings repo-local (sdu_settings.json) -> variables de entorno.
# Notes: No toca el payload ni el formato de salida; solo logging y render check.
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, MutableMapping

log = logging.getLogger(__name__)


# ------------------------------
# Project settings (repo-local)
# ------------------------------
# Archivo esperado: sdu_settings.json en la raíz del repo (o en un padre del CWD).
PROJECT_SETTINGS_FILENAME = "sdu_settings.json"

ENV_LOG_LEVEL = "SDU_LOG_LEVEL"
ENV_LOG_DIR = "SDU_LOG_DIR"
ENV_RENDER_SIZE = "SDU_RENDER_SIZE"

DEFAULT_RENDER_SIZE = 256
RENDER_SIZE_RANGE = (16, 1024)

_VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def find_project_settings_path(start: Path | None = None) -> Path | None:
    """Busca sdu_settings.json subiendo desde start (o CWD)."""
    start = (start or Path.cwd()).resolve()
    for p in (start, *start.parents):
        candidate = p / PROJECT_SETTINGS_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_project_settings(start: Path | None = None, *, logger: logging.Logger | None = None) -> Dict[str, Any]:
    """Carga el JSON de project settings. Devuelve {} si no existe o es inválido."""
    _log = logger or log
    p = find_project_settings_path(start)
    if not p:
        return {}
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except Exception as e:
        _log.warning("No se pudo leer %s: %s", p, e)
        return {}
    if not isinstance(data, dict):
        _log.warning("Ignorando %s: la raíz no es un objeto JSON", p)
        return {}
    return data


def _deep_get(d: Dict[str, Any], path: str, default: Any = None) -> Any:
    cur: Any = d
    for part in path.split("."):
        if not isinstance(cur, dict) or part not in cur:
            return default
        cur = cur[part]
    return cur


def apply_project_settings(
    start: Path | None = None,
    *,
    env: MutableMapping[str, str] | None = None,
    logger: logging.Logger | None = None,
    prefer_env: bool = True,
) -> Dict[str, Any]:
    """Carga sdu_settings.json (si existe) y lo aplica como variables de entorno.

    - Si `prefer_env=True`, una env var ya seteada NO se pisa.
    - Si `prefer_env=False`, el JSON pisa la env var.

    Devuelve un dict con los valores aplicados desde JSON (para logging/debug).
    """
    _log = logger or log
    target = os.environ if env is None else env
    data = load_project_settings(start, logger=_log)
    if not data:
        return {}

    applied: Dict[str, Any] = {}

    def _set_env(key: str, value: Any) -> None:
        if prefer_env and target.get(key):
            return
        target[key] = str(value)

    level = _deep_get(data, "log.level")
    if isinstance(level, str):
        level = level.strip().upper()
        if level in _VALID_LOG_LEVELS:
            applied["log.level"] = level
            _set_env(ENV_LOG_LEVEL, level)
        else:
            _log.warning("log.level inválido en settings: %r", level)

    log_dir = _deep_get(data, "log.dir")
    if isinstance(log_dir, str) and log_dir.strip():
        applied["log.dir"] = log_dir.strip()
        _set_env(ENV_LOG_DIR, log_dir.strip())

    size = _deep_get(data, "render.size_px")
    if isinstance(size, int) and not isinstance(size, bool):
        lo, hi = RENDER_SIZE_RANGE
        if lo <= size <= hi:
            applied["render.size_px"] = size
            _set_env(ENV_RENDER_SIZE, size)
        else:
            _log.warning("render.size_px fuera de rango (%d..%d): %d", lo, hi, size)

    if applied:
        _log.info("Project settings aplicados: %s", applied)
    return applied


def coerce_render_size(v: Any) -> int:
    """Clamp a RENDER_SIZE_RANGE; valores no numéricos -> DEFAULT_RENDER_SIZE."""
    return _coerce_int(v, *RENDER_SIZE_RANGE, DEFAULT_RENDER_SIZE)


def render_size_from_env(env: MutableMapping[str, str] | None = None) -> int:
    """Tamaño del render check (px) desde SDU_RENDER_SIZE, clamp a rango válido."""
    source = os.environ if env is None else env
    return coerce_render_size(source.get(ENV_RENDER_SIZE))


def _coerce_int(v: Any, min_v: int, max_v: int, default: int) -> int:
    try:
        n = int(v)
    except (TypeError, ValueError):
        return int(default)
    if n < min_v:
        return min_v
    if n > max_v:
        return max_v
    return n
