# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Drive one producer stream through parsing, annotation and summarising."""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, TextIO

from ..core.annotation_set import AnnotationSet
from ..core.severity import Severity, reaches_threshold
from ..parsers.base import MessageFormat, ParseContext
from ..reporting.summary import SummaryWriter, write_summary_file

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class RunResult:
    """Outcome of a completed annotation run."""

    emitted: int
    skipped: int
    max_severity: Severity | None
    summary_written: bool

    def failed(self, threshold: Severity) -> bool:
        """Return ``True`` when the emitted annotations reach ``threshold``."""

        return reaches_threshold(self.max_severity, threshold)


@dataclass(slots=True)
class Annotator:
    """Own the annotation set and summary state for one producer stream.

    Attributes:
        message_format: Parser and summary writer pairing of the producer.
        output: Stream receiving workflow command lines.
        context: Parse context shared by every record.
    """

    message_format: MessageFormat[Any]
    output: TextIO
    context: ParseContext = field(default_factory=ParseContext)
    annotations: AnnotationSet = field(default_factory=AnnotationSet)
    summary_writer: SummaryWriter[Any] = field(init=False)
    summary_content: io.StringIO = field(default_factory=io.StringIO)
    max_severity: Severity | None = None
    emitted: int = 0
    skipped: int = 0

    def __post_init__(self) -> None:
        self.summary_writer = self.message_format.summary_writer()

    def feed(self, payload: str) -> int:
        """Process one payload and return the number of annotations emitted.

        Payloads that do not parse as a record of the selected format are
        skipped. Summaries of a record are folded in only when at least one of
        its annotations was new.

        Args:
            payload: One line, or the whole output for whole-output formats.

        Returns:
            int: Count of newly emitted annotations.

        Raises:
            MissingPrimarySpanError: If a diagnostic lacks its primary span.
        """

        handler = self.message_format.parse(payload, self.context)
        if handler is None:
            self.skipped += 1
            LOGGER.debug("skipping non-record payload: %.80s", payload)
            return 0
        summaries = handler.summarize()
        emitted = 0
        for annotation in sorted(handler.into_annotations()):
            if not self.annotations.add(annotation):
                continue
            self.output.write(f"{annotation.encode()}\n")
            emitted += 1
            if self.max_severity is None or annotation.severity > self.max_severity:
                self.max_severity = annotation.severity
        if emitted and summaries is not None:
            for summary in summaries:
                self.summary_writer.write_summary(summary, self.summary_content)
        self.emitted += emitted
        return emitted

    def process(self, output: str) -> None:
        """Feed every payload contained in the captured producer ``output``."""

        for payload in self.message_format.iter_payloads(output):
            self.feed(payload)

    def finish(self, summary_path: Path | None) -> RunResult:
        """Write the job summary and return the run outcome.

        Args:
            summary_path: Sink for the Markdown summary, ``None`` to skip it.

        Returns:
            RunResult: Counters and the highest emitted severity.
        """

        self.output.flush()
        written = write_summary_file(self.summary_writer, self.summary_content.getvalue(), summary_path)
        return RunResult(
            emitted=self.emitted,
            skipped=self.skipped,
            max_severity=self.max_severity,
            summary_written=written,
        )


def annotate_output(
    output: str,
    message_format: MessageFormat[Any],
    *,
    stream: TextIO,
    summary_path: Path | None = None,
    base_dir: Path | None = None,
) -> RunResult:
    """Annotate captured producer ``output`` end to end.

    Args:
        output: Complete standard output of the producer.
        message_format: Parser and summary writer pairing of the producer.
        stream: Destination of the workflow command lines.
        summary_path: Optional sink for the Markdown job summary.
        base_dir: Directory reported paths are made relative to; defaults to cwd.

    Returns:
        RunResult: Outcome of the run.
    """

    context = ParseContext(base_dir=base_dir) if base_dir is not None else ParseContext()
    annotator = Annotator(message_format=message_format, output=stream, context=context)
    annotator.process(output)
    return annotator.finish(summary_path)


__all__ = ["Annotator", "RunResult", "annotate_output"]
