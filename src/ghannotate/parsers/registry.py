# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Lookup of the parser and summary writer pairing for each format."""

from __future__ import annotations

from typing import Any, Final

from ..reporting.diagnostics import DiagnosticSummaryWriter
from ..reporting.mismatches import FormatMismatchSummaryWriter
from .base import MessageFormat, MessageKind
from .rustc import parse_diagnostic
from .rustfmt import parse_format_report

DIAGNOSTIC_FORMAT: Final[MessageFormat[Any]] = MessageFormat(
    kind=MessageKind.DIAGNOSTIC,
    parse=parse_diagnostic,
    summary_writer=DiagnosticSummaryWriter,
)

FORMAT_MISMATCH_FORMAT: Final[MessageFormat[Any]] = MessageFormat(
    kind=MessageKind.FORMAT_MISMATCH,
    parse=parse_format_report,
    summary_writer=FormatMismatchSummaryWriter,
    whole_output=True,
)


def message_format(kind: MessageKind) -> MessageFormat[Any]:
    """Return the format definition registered for ``kind``.

    Args:
        kind: Producer format tag.

    Returns:
        MessageFormat[Any]: Parser and summary writer pairing for ``kind``.
    """

    match kind:
        case MessageKind.DIAGNOSTIC:
            return DIAGNOSTIC_FORMAT
        case MessageKind.FORMAT_MISMATCH:
            return FORMAT_MISMATCH_FORMAT
    raise ValueError(f"unsupported message kind: {kind!r}")


__all__ = ["DIAGNOSTIC_FORMAT", "FORMAT_MISMATCH_FORMAT", "message_format"]
