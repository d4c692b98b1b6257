# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Job summary writer contract and sink handling."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Generic, TextIO, TypeVar

SummaryT = TypeVar("SummaryT")

LOGGER = logging.getLogger(__name__)


class SummaryWriter(ABC, Generic[SummaryT]):
    """Accumulate summary items of one producer format into Markdown.

    The lifecycle is fixed: :meth:`write_summary` once per new item while the
    stream is processed, then :meth:`write_preamble`, the buffered body and
    :meth:`write_postamble`. The preamble is written last-but-one because it
    renders totals that are only known once every item has been folded in.
    """

    @abstractmethod
    def write_summary(self, summary: SummaryT, content: TextIO) -> None:
        """Append the Markdown for ``summary`` to ``content`` and update counters.

        Args:
            summary: Summary item produced by a record.
            content: In-memory buffer holding the summary body.
        """

    def write_preamble(self, file: TextIO) -> None:
        """Write the header and totals; called after every :meth:`write_summary`."""

        del file

    def write_postamble(self, file: TextIO) -> None:
        """Write the trailer; called after the buffered body."""

        del file


class NullSummaryWriter(SummaryWriter[object]):
    """Writer that satisfies the contract without producing any output."""

    def write_summary(self, summary: object, content: TextIO) -> None:
        del summary, content


def write_summary_file(writer: SummaryWriter[SummaryT], body: str, path: Path | None) -> bool:
    """Write the complete job summary to ``path``.

    Args:
        writer: Writer holding the counters accumulated during the run.
        body: Buffered Markdown produced by :meth:`SummaryWriter.write_summary`.
        path: Sink path, ``None`` when no summary destination is configured.

    Returns:
        bool: ``True`` when the file was written, ``False`` when skipped.
    """

    if path is None:
        LOGGER.debug("no summary sink configured; skipping job summary")
        return False
    try:
        handle = path.open("w", encoding="utf-8")
    except OSError as exc:
        LOGGER.warning("cannot create summary file %s: %s", path, exc)
        return False
    with handle:
        writer.write_preamble(handle)
        handle.write(body)
        writer.write_postamble(handle)
    LOGGER.debug("job summary written to %s", path)
    return True


__all__ = ["NullSummaryWriter", "SummaryT", "SummaryWriter", "write_summary_file"]
