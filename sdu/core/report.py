# File: sdu/core/report.py
# Project: SvgDataUri (SDU)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Formato de las tres líneas de salida (SVG / Base64 / URI esperada).
from __future__ import annotations

import sys
from typing import TextIO

from sdu.core.encoder import DataUriResult

LABEL_SVG = "SVG:"
LABEL_B64 = "Base64 Encoded:"
LABEL_URI = "Expected URI:"


def format_report(result: DataUriResult) -> list[str]:
    return [
        f"{LABEL_SVG} {result.svg}",
        f"{LABEL_B64} {result.b64}",
        f"{LABEL_URI} {result.uri}",
    ]


def print_report(result: DataUriResult, stream: TextIO | None = None) -> None:
    out = stream or sys.stdout
    for line in format_report(result):
        out.write(line + "\n")
    out.flush()
