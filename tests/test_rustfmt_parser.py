# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests covering the rustfmt mismatch report parser."""

from __future__ import annotations

import json
from pathlib import Path

from ghannotate.core.severity import Severity
from ghannotate.parsers.base import ParseContext
from ghannotate.parsers.rustfmt import (
    FormatMismatchesSummary,
    FormatReport,
    parse_format_report,
    relative_to_base,
)

BASE_DIR = Path("/work/demo")


def _mismatch(begin: int, end: int, expected: str) -> dict[str, object]:
    return {
        "original_begin_line": begin,
        "original_end_line": end,
        "expected_begin_line": begin,
        "expected_end_line": end,
        "original": "fn main(){}\n",
        "expected": expected,
    }


def _parse(records: list[dict[str, object]]) -> FormatReport:
    report = parse_format_report(json.dumps(records), ParseContext(base_dir=BASE_DIR))
    assert report is not None
    return report


def test_relative_to_base_strips_prefix_and_separators() -> None:
    assert relative_to_base("/work/demo/src/main.rs", BASE_DIR) == "src/main.rs"
    assert relative_to_base("/elsewhere/lib.rs", BASE_DIR) == "elsewhere/lib.rs"
    assert relative_to_base("src/lib.rs", BASE_DIR) == "src/lib.rs"


def test_each_mismatch_becomes_a_warning() -> None:
    report = _parse(
        [
            {
                "name": "/work/demo/src/main.rs",
                "mismatches": [_mismatch(1, 1, "fn main() {}\n"), _mismatch(5, 7, "let x = 1;\n")],
            },
        ],
    )
    annotations = report.into_annotations()
    assert [annotation.encode() for annotation in annotations] == [
        "::warning file=src/main.rs,line=1,endLine=1,title=Format mismatch::fn main() {}",
        "::warning file=src/main.rs,line=5,endLine=7,title=Format mismatch::let x = 1;",
    ]
    assert all(annotation.col is None for annotation in annotations)


def test_overlapping_records_for_one_file_group_in_summary() -> None:
    report = _parse(
        [
            {"name": "/work/demo/src/lib.rs", "mismatches": [_mismatch(3, 6, "a\n")]},
            {"name": "/work/demo/src/lib.rs", "mismatches": [_mismatch(4, 8, "b\n")]},
        ],
    )
    annotations = report.into_annotations()
    assert len(set(annotations)) == 2
    assert {annotation.severity for annotation in annotations} == {Severity.WARNING}
    assert {annotation.title for annotation in annotations} == {"Format mismatch"}
    assert report.summarize() == [FormatMismatchesSummary(file="src/lib.rs", lines=(3, 4))]


def test_file_key_is_accepted_as_path() -> None:
    report = _parse([{"file": "/work/demo/src/a.rs", "mismatches": [_mismatch(2, 2, "x\n")]}])
    assert report.into_annotations()[0].file == "src/a.rs"


def test_non_array_output_is_rejected() -> None:
    context = ParseContext(base_dir=BASE_DIR)
    assert parse_format_report("", context) is None
    assert parse_format_report("Warning: can't set `imports_granularity`", context) is None
    assert parse_format_report('{"name": "x", "mismatches": []}', context) is None


def test_empty_array_yields_nothing() -> None:
    report = _parse([])
    assert report.into_annotations() == []
    assert report.summarize() == []


def test_relative_to_base_only_strips_whole_components() -> None:
    assert relative_to_base("/work/demo2/src/x.rs", BASE_DIR) == "work/demo2/src/x.rs"
    assert relative_to_base("/work/demo/x.rs", BASE_DIR) == "x.rs"


def test_one_array_per_line_is_concatenated() -> None:
    output = "\n".join(
        [
            json.dumps([{"name": "/work/demo/a.rs", "mismatches": [_mismatch(1, 1, "a\n")]}]),
            "",
            json.dumps([{"name": "/work/demo/b.rs", "mismatches": [_mismatch(2, 3, "b\n")]}]),
            "",
        ],
    )
    report = parse_format_report(output, ParseContext(base_dir=BASE_DIR))
    assert report is not None
    assert [annotation.file for annotation in report.into_annotations()] == ["a.rs", "b.rs"]
    assert report.summarize() == [
        FormatMismatchesSummary(file="a.rs", lines=(1,)),
        FormatMismatchesSummary(file="b.rs", lines=(2,)),
    ]


def test_lines_without_an_array_are_ignored_between_reports() -> None:
    output = "\n".join(
        [
            "Warning: can't set `imports_granularity = Crate`, unstable features are only available in nightly",
            json.dumps([{"name": "/work/demo/a.rs", "mismatches": [_mismatch(4, 4, "a\n")]}]),
            "[]",
        ],
    )
    report = parse_format_report(output, ParseContext(base_dir=BASE_DIR))
    assert report is not None
    assert [annotation.line for annotation in report.into_annotations()] == [4]


def test_mismatch_with_inverted_range_is_rejected() -> None:
    payload = json.dumps([{"name": "/work/demo/a.rs", "mismatches": [_mismatch(5, 4, "a\n")]}])
    assert parse_format_report(payload, ParseContext(base_dir=BASE_DIR)) is None
