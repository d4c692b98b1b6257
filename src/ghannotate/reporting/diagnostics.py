# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Markdown job summary for compiler diagnostics."""

from __future__ import annotations

from collections import Counter
from typing import Final, TextIO

from ..core.severity import Severity
from ..parsers.rustc import DiagnosticSummary
from .summary import SummaryWriter

TABLE_HEADER: Final[str] = "|Level|Message|Location|\n|:--|:--|--:|\n"

# Highest severity first in the totals line.
_TOTALS_ORDER: Final[tuple[Severity, ...]] = (Severity.ERROR, Severity.WARNING, Severity.NOTICE)


def escape_cell(text: str) -> str:
    """Return ``text`` safe to place inside a Markdown table cell."""

    return text.replace("|", "\\|").replace("\r\n", "<br>").replace("\n", "<br>")


class DiagnosticSummaryWriter(SummaryWriter[DiagnosticSummary]):
    """Render diagnostics as a table preceded by per-severity totals."""

    def __init__(self) -> None:
        self.counts: Counter[Severity] = Counter()

    def write_summary(self, summary: DiagnosticSummary, content: TextIO) -> None:
        severity = summary.severity
        self.counts[severity] += 1
        location = f"`{summary.location[0]}:{summary.location[1]}`" if summary.location else ""
        content.write(f"|{severity.label}|{escape_cell(summary.message)}|{location}|\n")

    def write_preamble(self, file: TextIO) -> None:
        totals = ", ".join(f"{self.counts[severity]} {severity.label}s" for severity in _TOTALS_ORDER)
        file.write(f"> **TOTAL:** {totals}\n\n")
        file.write(TABLE_HEADER)


__all__ = ["DiagnosticSummaryWriter", "TABLE_HEADER", "escape_cell"]
