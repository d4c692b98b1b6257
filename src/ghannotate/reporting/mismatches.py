# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Markdown job summary for formatter mismatches."""

from __future__ import annotations

from typing import TextIO

from ..parsers.rustfmt import FormatMismatchesSummary
from .summary import SummaryWriter


class FormatMismatchSummaryWriter(SummaryWriter[FormatMismatchesSummary]):
    """Render one bullet per file with its mismatched lines nested below."""

    def __init__(self) -> None:
        self.count = 0

    def write_summary(self, summary: FormatMismatchesSummary, content: TextIO) -> None:
        self.count += len(summary.lines)
        content.write(f"- `{summary.file}`\n")
        for line in summary.lines:
            content.write(f"  - L{line}\n")

    def write_preamble(self, file: TextIO) -> None:
        file.write(f"> **TOTAL:** {self.count} mismatches\n\n")


__all__ = ["FormatMismatchSummaryWriter"]
