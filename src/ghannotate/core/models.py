# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core annotation model shared by every producer format."""

from __future__ import annotations

from pathlib import PurePosixPath
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .severity import Severity

# Order matters: ``%`` must be escaped before the sequences it introduces.
_MESSAGE_ESCAPES: Final[tuple[tuple[str, str], ...]] = (
    ("%", "%25"),
    ("\n", "%0A"),
    ("\r", "%0D"),
)

AnnotationSortKey = tuple[
    tuple[str, ...],
    int,
    tuple[bool, int],
    int,
    tuple[bool, int],
    tuple[bool, int],
    tuple[bool, str],
    str,
    str,
]


def escape_message(message: str) -> str:
    """Return ``message`` trimmed and escaped for a workflow command.

    Args:
        message: Raw annotation body, possibly spanning several lines.

    Returns:
        str: Single-line text safe to place after the final ``::`` separator.
    """

    escaped = message.strip()
    for needle, replacement in _MESSAGE_ESCAPES:
        escaped = escaped.replace(needle, replacement)
    return escaped


def _optional_key(value: int | None) -> tuple[bool, int]:
    """Sort absent values before present ones."""

    return (value is not None, value if value is not None else 0)


class Annotation(BaseModel):
    """Normalized annotation destined for the GitHub Actions runner.

    Instances are immutable and hashable; two annotations are the same
    annotation when every field is equal.
    """

    model_config = ConfigDict(frozen=True)

    severity: Severity
    file: str
    line: int = Field(ge=1)
    end_line: int | None = Field(default=None, ge=1)
    col: int | None = Field(default=None, ge=1)
    end_column: int | None = Field(default=None, ge=1)
    title: str | None = None
    message: str

    @model_validator(mode="after")
    def _check_ranges(self) -> Annotation:
        """Validate the line and column range invariants."""
        if self.end_line is not None and self.end_line < self.line:
            raise ValueError(f"end_line ({self.end_line}) precedes line ({self.line})")
        if self.end_column is not None and self.col is None:
            raise ValueError("end_column requires col")
        return self

    def sort_key(self) -> AnnotationSortKey:
        """Return the key implementing the annotation total order.

        Annotations sort by path components, then line, then column (absent
        first), then severity with the most severe first. The remaining fields
        only break ties between structurally distinct annotations; the raw
        path comes last because equivalent spellings such as ``./src/a.rs``
        and ``src/a.rs`` share their components.

        Returns:
            AnnotationSortKey: Tuple suitable for :func:`sorted` and :mod:`bisect`.
        """

        return (
            PurePosixPath(self.file).parts,
            self.line,
            _optional_key(self.col),
            -self.severity.rank,
            _optional_key(self.end_line),
            _optional_key(self.end_column),
            (self.title is not None, self.title or ""),
            self.message,
            self.file,
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Annotation):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Annotation):
            return NotImplemented
        return self.sort_key() <= other.sort_key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Annotation):
            return NotImplemented
        return self.sort_key() > other.sort_key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Annotation):
            return NotImplemented
        return self.sort_key() >= other.sort_key()

    def encode(self) -> str:
        """Return the annotation as a single workflow command line.

        Returns:
            str: ``::<severity> file=...,line=...::<message>`` without a
            trailing newline.
        """

        properties = [f"file={self.file}", f"line={self.line}"]
        if self.end_line is not None:
            properties.append(f"endLine={self.end_line}")
        if self.col is not None:
            properties.append(f"col={self.col}")
            if self.end_column is not None:
                properties.append(f"endColumn={self.end_column}")
        if self.title is not None:
            properties.append(f"title={self.title}")
        return f"::{self.severity.value} {','.join(properties)}::{escape_message(self.message)}"

    def __str__(self) -> str:
        return self.encode()


__all__ = ["Annotation", "AnnotationSortKey", "escape_message"]
