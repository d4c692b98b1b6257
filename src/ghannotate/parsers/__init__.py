# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Public parser exports for converting Cargo output into annotations."""

from __future__ import annotations

from .base import MessageFormat, MessageHandler, MessageKind, ParseContext
from .rustc import Diagnostic, DiagnosticLevel, MissingPrimarySpanError, parse_diagnostic
from .rustfmt import FormatMismatches, FormatReport, parse_format_report

__all__ = [
    "Diagnostic",
    "DiagnosticLevel",
    "FormatMismatches",
    "FormatReport",
    "MessageFormat",
    "MessageHandler",
    "MessageKind",
    "MissingPrimarySpanError",
    "ParseContext",
    "parse_diagnostic",
    "parse_format_report",
]
