# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Parser for the JSON diagnostics emitted by rustc through Cargo."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final, Literal

from pydantic import BaseModel, Field, TypeAdapter, ValidationError, model_validator

from ..core.models import Annotation
from ..core.severity import Severity
from .base import ParseContext


class MissingPrimarySpanError(RuntimeError):
    """Raised when a diagnostic has no span flagged as primary."""

    def __init__(self, message: str) -> None:
        """Initialise the error with the offending diagnostic message.

        Args:
            message: Primary message of the diagnostic lacking a primary span.
        """

        super().__init__(f"Diagnostic has no primary span: {message!r}")
        self.diagnostic_message = message


class DiagnosticLevel(str, Enum):
    """Severity of a rustc diagnostic."""

    ERROR = "error"
    WARNING = "warning"
    NOTE = "note"
    HELP = "help"
    FAILURE_NOTE = "failure-note"
    INTERNAL_COMPILER_ERROR = "error: internal compiler error"

    @property
    def severity(self) -> Severity:
        """Return the annotation severity this level maps to."""

        return DIAGNOSTIC_SEVERITY_MAP[self]


DIAGNOSTIC_SEVERITY_MAP: Final[dict[DiagnosticLevel, Severity]] = {
    DiagnosticLevel.ERROR: Severity.ERROR,
    DiagnosticLevel.INTERNAL_COMPILER_ERROR: Severity.ERROR,
    DiagnosticLevel.WARNING: Severity.WARNING,
    DiagnosticLevel.NOTE: Severity.NOTICE,
    DiagnosticLevel.HELP: Severity.NOTICE,
    DiagnosticLevel.FAILURE_NOTE: Severity.NOTICE,
}


class DiagnosticSpan(BaseModel):
    """Location of a diagnostic in the source code.

    Lines and columns are 1-based; ``column_end`` is exclusive.
    """

    file_name: str
    line_start: int = Field(ge=1)
    line_end: int = Field(ge=1)
    column_start: int = Field(ge=1)
    column_end: int = Field(ge=1)
    is_primary: bool

    @model_validator(mode="after")
    def _check_line_range(self) -> DiagnosticSpan:
        if self.line_end < self.line_start:
            raise ValueError(f"line_end ({self.line_end}) precedes line_start ({self.line_start})")
        return self


@dataclass(frozen=True, slots=True)
class DiagnosticSummary:
    """Summary item describing one diagnostic."""

    level: DiagnosticLevel
    message: str
    location: tuple[str, int] | None = None

    @property
    def severity(self) -> Severity:
        """Return the normalised severity of the summarised diagnostic."""

        return self.level.severity


class Diagnostic(BaseModel):
    """Diagnostic message printed by rustc."""

    message: str
    level: DiagnosticLevel
    spans: list[DiagnosticSpan]
    rendered: str | None = None

    def primary_span(self) -> DiagnosticSpan | None:
        """Return the first span flagged as primary, if any."""

        return next((span for span in self.spans if span.is_primary), None)

    def into_annotations(self) -> list[Annotation]:
        """Return the single annotation located at the primary span.

        Returns:
            list[Annotation]: One annotation; the rendered text becomes the body
            and the short message the title when rustc rendered the diagnostic.

        Raises:
            MissingPrimarySpanError: If no span is flagged as primary.
        """

        span = self.primary_span()
        if span is None:
            raise MissingPrimarySpanError(self.message)
        return [
            Annotation(
                severity=self.level.severity,
                file=span.file_name,
                line=span.line_start,
                end_line=span.line_end if span.line_end != span.line_start else None,
                col=span.column_start,
                end_column=span.column_end,
                title=self.message if self.rendered is not None else None,
                message=self.rendered if self.rendered is not None else self.message,
            ),
        ]

    def summarize(self) -> list[DiagnosticSummary]:
        """Return the summary item for this diagnostic."""

        span = self.primary_span()
        location = (span.file_name, span.line_start) if span is not None else None
        return [DiagnosticSummary(level=self.level, message=self.message, location=location)]


class CompilerMessage(BaseModel):
    """Cargo envelope wrapping a rustc diagnostic."""

    reason: Literal["compiler-message"]
    message: Diagnostic


_DIAGNOSTIC_ADAPTER: Final[TypeAdapter[Diagnostic | CompilerMessage]] = TypeAdapter(Diagnostic | CompilerMessage)


def parse_diagnostic(payload: str, context: ParseContext) -> Diagnostic | None:
    """Parse one output line as a rustc diagnostic.

    Both the bare diagnostic object and Cargo's ``compiler-message`` envelope
    are accepted.

    Args:
        payload: One line of producer output.
        context: Run-wide parse context (unused by this format).

    Returns:
        Diagnostic | None: Parsed diagnostic, or ``None`` when the line is not one.
    """

    del context
    try:
        record = _DIAGNOSTIC_ADAPTER.validate_json(payload)
    except ValidationError:
        return None
    if isinstance(record, CompilerMessage):
        return record.message
    return record


__all__ = [
    "DIAGNOSTIC_SEVERITY_MAP",
    "CompilerMessage",
    "Diagnostic",
    "DiagnosticLevel",
    "DiagnosticSpan",
    "DiagnosticSummary",
    "MissingPrimarySpanError",
    "parse_diagnostic",
]
