# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for configuration and summary sink resolution."""

from __future__ import annotations

from pathlib import Path

import pytest

from ghannotate.config import AnnotateConfig, ConfigError, resolve_summary_path
from ghannotate.core.severity import Severity


def test_summary_path_prefers_environment() -> None:
    env = {"GITHUB_STEP_SUMMARY": "/runner/_temp/step_summary"}
    assert resolve_summary_path(env) == Path("/runner/_temp/step_summary")
    assert resolve_summary_path(env, debug=True) == Path("/runner/_temp/step_summary")


def test_summary_path_falls_back_only_in_debug() -> None:
    assert resolve_summary_path({}) is None
    assert resolve_summary_path({"GITHUB_STEP_SUMMARY": "  "}) is None
    assert resolve_summary_path({}, debug=True) == Path("SUMMARY.md")


def test_from_environment_reads_cargo_variable(tmp_path: Path) -> None:
    config = AnnotateConfig.from_environment({"CARGO": "/opt/cargo/bin/cargo"}, base_dir=tmp_path)
    assert config.cargo == "/opt/cargo/bin/cargo"
    assert config.base_dir == tmp_path
    assert config.summary_path is None
    assert config.threshold is Severity.WARNING


def test_explicit_cargo_overrides_environment() -> None:
    config = AnnotateConfig.from_environment({"CARGO": "/opt/cargo"}, cargo="cargo-nightly", allow_warnings=True)
    assert config.cargo == "cargo-nightly"
    assert config.threshold is Severity.ERROR


def test_blank_cargo_is_rejected() -> None:
    with pytest.raises(ConfigError):
        AnnotateConfig.from_environment({}, cargo="   ")
