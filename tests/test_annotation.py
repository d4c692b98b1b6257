# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the annotation model and its workflow command encoding."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from ghannotate.core.models import Annotation, escape_message
from ghannotate.core.severity import Severity


def _annotation(**overrides: object) -> Annotation:
    values: dict[str, object] = {
        "severity": Severity.WARNING,
        "file": "src/a.rs",
        "line": 3,
        "message": "unused variable",
    }
    values.update(overrides)
    return Annotation.model_validate(values)


def test_encode_minimal_annotation() -> None:
    assert _annotation().encode() == "::warning file=src/a.rs,line=3::unused variable"


def test_encode_full_annotation() -> None:
    annotation = _annotation(
        severity=Severity.ERROR,
        end_line=4,
        col=2,
        end_column=9,
        title="mismatched types",
        message="error[E0308]: mismatched types",
    )
    assert str(annotation) == (
        "::error file=src/a.rs,line=3,endLine=4,col=2,endColumn=9,title=mismatched types"
        "::error[E0308]: mismatched types"
    )


def test_encode_notice_token_is_lowercase() -> None:
    assert _annotation(severity=Severity.NOTICE).encode().startswith("::notice ")


def test_message_escapes_percent_before_line_breaks() -> None:
    assert escape_message("100%\nfoo\rbar") == "100%25%0Afoo%0Dbar"
    assert escape_message("%0A") == "%250A"


def test_message_is_trimmed_before_escaping() -> None:
    annotation = _annotation(message="\n  warning: first\nsecond\n\n")
    assert annotation.encode().endswith("::warning: first%0Asecond")


def test_line_must_be_positive() -> None:
    with pytest.raises(ValidationError):
        _annotation(line=0)


def test_end_line_cannot_precede_line() -> None:
    with pytest.raises(ValidationError):
        _annotation(line=5, end_line=4)


def test_end_column_requires_column() -> None:
    with pytest.raises(ValidationError):
        _annotation(end_column=4)


def test_annotations_are_immutable_and_structurally_equal() -> None:
    first = _annotation()
    second = _annotation()
    assert first == second
    assert hash(first) == hash(second)
    assert first != _annotation(message="other")
    with pytest.raises(ValidationError):
        first.line = 10  # type: ignore[misc]


def test_order_by_path_components_then_line_then_column() -> None:
    ordered = [
        _annotation(file="src/a/b.rs", line=1),
        _annotation(file="src/a.rs", line=1),
        _annotation(file="src/a.rs", line=2),
        _annotation(file="src/a.rs", line=2, col=1),
        _annotation(file="src/a.rs", line=2, col=7),
        _annotation(file="src/ab.rs", line=1),
    ]
    assert sorted(reversed(ordered)) == ordered


def test_more_severe_annotation_sorts_first_on_same_position() -> None:
    notice = _annotation(severity=Severity.NOTICE)
    warning = _annotation(severity=Severity.WARNING)
    error = _annotation(severity=Severity.ERROR)
    assert sorted([notice, warning, error]) == [error, warning, notice]


def test_distinct_annotations_never_compare_equal_in_order() -> None:
    first = _annotation(message="a")
    second = _annotation(message="b")
    assert first < second or second < first


def test_equivalent_path_spellings_still_have_a_strict_order() -> None:
    dotted = _annotation(file="./src/a.rs")
    plain = _annotation(file="src/a.rs")
    assert dotted != plain
    assert (dotted < plain) != (plain < dotted)


def test_absent_title_differs_from_empty_title_in_order() -> None:
    untitled = _annotation()
    empty = _annotation(title="")
    assert untitled < empty
