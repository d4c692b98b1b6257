# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import json
from collections.abc import Callable

import pytest

UNUSED_VARIABLE_LINE = (
    '{"message":"unused variable","level":"warning","spans":[{"file_name":"src/a.rs",'
    '"line_start":3,"line_end":3,"column_start":1,"column_end":5,"is_primary":true}],"rendered":null}'
)


def diagnostic_json(
    *,
    message: str = "unused variable",
    level: str = "warning",
    file_name: str = "src/a.rs",
    line: int = 3,
    line_end: int | None = None,
    column: int = 1,
    column_end: int = 5,
    rendered: str | None = None,
    primary: bool = True,
) -> str:
    """Return one rustc diagnostic serialised on a single line."""

    return json.dumps(
        {
            "message": message,
            "code": None,
            "level": level,
            "spans": [
                {
                    "file_name": file_name,
                    "line_start": line,
                    "line_end": line if line_end is None else line_end,
                    "column_start": column,
                    "column_end": column_end,
                    "is_primary": primary,
                    "label": None,
                },
            ],
            "children": [],
            "rendered": rendered,
        },
    )


@pytest.fixture
def unused_variable_line() -> str:
    """Return the canonical single-warning diagnostic line."""

    return UNUSED_VARIABLE_LINE


@pytest.fixture
def make_diagnostic() -> Callable[..., str]:
    """Return a factory producing serialised rustc diagnostics."""

    return diagnostic_json
