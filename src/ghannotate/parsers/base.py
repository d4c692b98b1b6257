# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared parser infrastructure for producer records."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Generic, Protocol, TypeVar, runtime_checkable

from ..core.models import Annotation
from ..reporting.summary import SummaryWriter

SummaryT = TypeVar("SummaryT")
SummaryT_co = TypeVar("SummaryT_co", covariant=True)


class MessageKind(str, Enum):
    """Closed set of producer formats understood by the annotator."""

    DIAGNOSTIC = "diagnostic"
    FORMAT_MISMATCH = "format-mismatch"


@dataclass(frozen=True, slots=True)
class ParseContext:
    """Inputs shared by every record conversion of a run.

    Attributes:
        base_dir: Directory that producer paths are made relative to.
    """

    base_dir: Path = field(default_factory=Path.cwd)


@runtime_checkable
class MessageHandler(Protocol[SummaryT_co]):
    """Record that can be turned into annotations and summary items."""

    def into_annotations(self) -> list[Annotation]:
        """Return the annotations described by this record."""
        ...

    def summarize(self) -> Sequence[SummaryT_co] | None:
        """Return summary items, or ``None`` when the format has no summary support."""
        ...


@dataclass(frozen=True, slots=True)
class MessageFormat(Generic[SummaryT]):
    """Pair a record parser with the summary writer of the same format.

    Attributes:
        kind: Format tag.
        parse: Callable returning a handler, or ``None`` for unusable payloads.
        summary_writer: Factory for a fresh writer accumulating this format's summaries.
        whole_output: ``True`` when the entire captured output is one payload
            rather than one payload per line.
    """

    kind: MessageKind
    parse: Callable[[str, ParseContext], MessageHandler[SummaryT] | None]
    summary_writer: Callable[[], SummaryWriter[SummaryT]]
    whole_output: bool = False

    def iter_payloads(self, output: str) -> Iterator[str]:
        """Yield the payloads contained in captured producer ``output``.

        Args:
            output: Complete standard output of the producer.

        Yields:
            str: Individual payloads handed to :attr:`parse`.
        """

        if self.whole_output:
            yield output
            return
        yield from output.splitlines()


__all__ = [
    "MessageFormat",
    "MessageHandler",
    "MessageKind",
    "ParseContext",
    "SummaryT",
]
