# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared constants used across ghannotate modules."""

from __future__ import annotations

from typing import Final

SUMMARY_PATH_ENV: Final[str] = "GITHUB_STEP_SUMMARY"
"""Environment variable holding the path of the job summary file."""

DEBUG_SUMMARY_PATH: Final[str] = "SUMMARY.md"
"""Summary file written when debugging outside of GitHub Actions."""

CARGO_ENV: Final[str] = "CARGO"
DEFAULT_CARGO: Final[str] = "cargo"
CARGO_SUBCOMMAND_NAME: Final[str] = "ghannotate"

MESSAGE_FORMAT_FLAG: Final[str] = "--message-format=json"
FORMAT_TOOLCHAIN: Final[str] = "nightly"

FORMAT_MISMATCH_TITLE: Final[str] = "Format mismatch"

__all__ = [
    "CARGO_ENV",
    "CARGO_SUBCOMMAND_NAME",
    "DEBUG_SUMMARY_PATH",
    "DEFAULT_CARGO",
    "FORMAT_MISMATCH_TITLE",
    "FORMAT_TOOLCHAIN",
    "MESSAGE_FORMAT_FLAG",
    "SUMMARY_PATH_ENV",
]
