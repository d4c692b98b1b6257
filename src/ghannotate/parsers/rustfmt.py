# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Parser for the JSON report emitted by ``cargo fmt --message-format=json``."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path, PurePath
from typing import Final

from pydantic import AliasChoices, BaseModel, Field, TypeAdapter, ValidationError, model_validator

from ..constants import FORMAT_MISMATCH_TITLE
from ..core.models import Annotation
from ..core.severity import Severity
from .base import ParseContext

LOGGER = logging.getLogger(__name__)

_SEPARATORS: Final[str] = "/\\"


def relative_to_base(name: str, base_dir: Path) -> str:
    """Strip ``base_dir`` and leading separators from a reported path.

    Only whole path components are stripped, so a sibling directory sharing a
    textual prefix with ``base_dir`` is left intact.

    Args:
        name: Path as reported by rustfmt, usually absolute.
        base_dir: Repository root the annotation paths are relative to.

    Returns:
        str: Path relative to ``base_dir`` when it lies below it, else ``name``
        without leading separators.
    """

    path = PurePath(name)
    if path.is_absolute() and path.is_relative_to(base_dir):
        return str(path.relative_to(base_dir))
    return name.lstrip(_SEPARATORS)


class FormatMismatch(BaseModel):
    """Single block of code that differs from rustfmt's output.

    All line numbers are 1-based and inclusive.
    """

    original_begin_line: int = Field(ge=1)
    original_end_line: int = Field(ge=1)
    expected_begin_line: int
    expected_end_line: int
    original: str
    expected: str

    @model_validator(mode="after")
    def _check_original_range(self) -> FormatMismatch:
        if self.original_end_line < self.original_begin_line:
            raise ValueError("original_end_line precedes original_begin_line")
        return self


class FormatMismatches(BaseModel):
    """Mismatches reported for one file."""

    name: str = Field(validation_alias=AliasChoices("name", "file"))
    mismatches: list[FormatMismatch]


@dataclass(frozen=True, slots=True)
class FormatMismatchesSummary:
    """Summary item listing the mismatched lines of one file."""

    file: str
    lines: tuple[int, ...]


@dataclass(slots=True)
class FormatReport:
    """Complete rustfmt report of one invocation.

    Attributes:
        files: Per-file mismatch records in producer order.
        base_dir: Directory that reported paths are made relative to.
    """

    files: list[FormatMismatches]
    base_dir: Path = field(default_factory=Path.cwd)

    def into_annotations(self) -> list[Annotation]:
        """Return one warning annotation per mismatch block."""

        annotations: list[Annotation] = []
        for record in self.files:
            file_name = relative_to_base(record.name, self.base_dir)
            for mismatch in record.mismatches:
                annotations.append(
                    Annotation(
                        severity=Severity.WARNING,
                        file=file_name,
                        line=mismatch.original_begin_line,
                        end_line=mismatch.original_end_line,
                        title=FORMAT_MISMATCH_TITLE,
                        message=mismatch.expected,
                    ),
                )
        return annotations

    def summarize(self) -> list[FormatMismatchesSummary]:
        """Return one summary item per file, merging repeated file records."""

        grouped: dict[str, list[int]] = {}
        for record in self.files:
            lines = grouped.setdefault(relative_to_base(record.name, self.base_dir), [])
            lines.extend(mismatch.original_begin_line for mismatch in record.mismatches)
        return [FormatMismatchesSummary(file=file_name, lines=tuple(lines)) for file_name, lines in grouped.items()]


_REPORT_ADAPTER: Final[TypeAdapter[list[FormatMismatches]]] = TypeAdapter(list[FormatMismatches])


def _parse_report_lines(payload: str) -> list[FormatMismatches] | None:
    """Concatenate the arrays printed one per line by successive rustfmt runs."""

    files: list[FormatMismatches] = []
    matched = False
    for line in payload.splitlines():
        if not line.strip():
            continue
        try:
            files.extend(_REPORT_ADAPTER.validate_json(line))
        except ValidationError:
            LOGGER.debug("skipping non-report line: %.80s", line)
            continue
        matched = True
    return files if matched else None


def parse_format_report(payload: str, context: ParseContext) -> FormatReport | None:
    """Parse the complete captured rustfmt output as one report.

    ``cargo fmt`` runs rustfmt once per package, and each run prints its own
    JSON array. The output is first read as a single (possibly multi-line)
    array; failing that, every line holding an array contributes its records.

    Args:
        payload: Entire standard output of the formatter.
        context: Run-wide parse context supplying the base directory.

    Returns:
        FormatReport | None: Parsed report, or ``None`` when the output holds none.
    """

    try:
        files = _REPORT_ADAPTER.validate_json(payload)
    except ValidationError:
        parsed = _parse_report_lines(payload)
        if parsed is None:
            return None
        files = parsed
    return FormatReport(files=files, base_dir=context.base_dir)


__all__ = [
    "FormatMismatch",
    "FormatMismatches",
    "FormatMismatchesSummary",
    "FormatReport",
    "parse_format_report",
    "relative_to_base",
]
