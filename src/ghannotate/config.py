# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Runtime configuration for an annotation run."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .constants import CARGO_ENV, DEBUG_SUMMARY_PATH, DEFAULT_CARGO, SUMMARY_PATH_ENV
from .core.severity import Severity, failure_threshold


class ConfigError(Exception):
    """Raised when configuration values are invalid."""


def resolve_summary_path(env: Mapping[str, str] | None = None, *, debug: bool = False) -> Path | None:
    """Return the job summary sink, if any.

    Args:
        env: Environment mapping; defaults to :data:`os.environ`.
        debug: When ``True`` fall back to :data:`DEBUG_SUMMARY_PATH`.

    Returns:
        Path | None: Sink path, or ``None`` when the summary should be skipped.
    """

    environment = os.environ if env is None else env
    value = environment.get(SUMMARY_PATH_ENV, "").strip()
    if value:
        return Path(value)
    if debug:
        return Path(DEBUG_SUMMARY_PATH)
    return None


class AnnotateConfig(BaseModel):
    """Settings controlling one invocation."""

    model_config = ConfigDict(frozen=True)

    cargo: str = DEFAULT_CARGO
    allow_warnings: bool = False
    debug: bool = False
    base_dir: Path = Field(default_factory=Path.cwd)
    summary_path: Path | None = None

    @field_validator("cargo")
    @classmethod
    def _require_cargo(cls, value: str) -> str:
        """Reject blank executable names."""
        if not value.strip():
            raise ValueError("cargo executable must not be empty")
        return value

    @property
    def threshold(self) -> Severity:
        """Return the lowest severity that fails the run."""

        return failure_threshold(allow_warnings=self.allow_warnings)

    @classmethod
    def from_environment(
        cls,
        env: Mapping[str, str] | None = None,
        *,
        cargo: str | None = None,
        allow_warnings: bool = False,
        debug: bool = False,
        base_dir: Path | None = None,
    ) -> AnnotateConfig:
        """Build a configuration from CLI values and the environment.

        Args:
            env: Environment mapping; defaults to :data:`os.environ`.
            cargo: Explicit Cargo executable overriding ``$CARGO``.
            allow_warnings: Whether warnings are tolerated.
            debug: Whether debug output and the fallback summary path are enabled.
            base_dir: Repository root; defaults to the current directory.

        Returns:
            AnnotateConfig: Validated configuration.

        Raises:
            ConfigError: If a value fails validation.
        """

        environment = os.environ if env is None else env
        values: dict[str, object] = {
            "cargo": cargo or environment.get(CARGO_ENV) or DEFAULT_CARGO,
            "allow_warnings": allow_warnings,
            "debug": debug,
            "summary_path": resolve_summary_path(environment, debug=debug),
        }
        if base_dir is not None:
            values["base_dir"] = base_dir
        try:
            return cls.model_validate(values)
        except ValidationError as exc:
            raise ConfigError(str(exc)) from exc


__all__ = ["AnnotateConfig", "ConfigError", "resolve_summary_path"]
