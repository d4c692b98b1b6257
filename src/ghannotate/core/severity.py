# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Severity related types and helpers."""

from __future__ import annotations

from enum import Enum
from typing import Final


class Severity(str, Enum):
    """Severity of an annotation, ordered ``NOTICE < WARNING < ERROR``.

    The string value is the token GitHub expects in a workflow command
    (``::notice``, ``::warning``, ``::error``).
    """

    NOTICE = "notice"
    WARNING = "warning"
    ERROR = "error"

    @property
    def rank(self) -> int:
        """Return the position of the severity in the linear order."""

        return _SEVERITY_RANK[self]

    @property
    def emoji(self) -> str:
        """Return the emoji rendered next to the severity in summaries."""

        return _SEVERITY_EMOJI[self]

    @property
    def label(self) -> str:
        """Return the human-readable label used in Markdown summaries."""

        return f"{self.emoji} {self.name.capitalize()}"

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank >= other.rank


_SEVERITY_RANK: Final[dict[Severity, int]] = {
    Severity.NOTICE: 0,
    Severity.WARNING: 1,
    Severity.ERROR: 2,
}

_SEVERITY_EMOJI: Final[dict[Severity, str]] = {
    Severity.NOTICE: "ℹ️",
    Severity.WARNING: "⚠️",
    Severity.ERROR: "❌",
}


def failure_threshold(*, allow_warnings: bool) -> Severity:
    """Return the lowest severity that makes a run fail.

    Args:
        allow_warnings: When ``True`` only errors fail the run.

    Returns:
        Severity: ``ERROR`` when warnings are allowed, otherwise ``WARNING``.
    """

    return Severity.ERROR if allow_warnings else Severity.WARNING


def reaches_threshold(max_severity: Severity | None, threshold: Severity) -> bool:
    """Return ``True`` when ``max_severity`` meets or exceeds ``threshold``.

    Args:
        max_severity: Highest severity emitted during the run, ``None`` when
            nothing was emitted.
        threshold: Severity at which the run is considered failed.

    Returns:
        bool: ``True`` when the run should exit with a failure status.
    """

    if max_severity is None:
        return False
    return max_severity >= threshold


__all__ = ["Severity", "failure_threshold", "reaches_threshold"]
