# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (logging, errors)."""

from __future__ import annotations

from dataclasses import dataclass

from ..core.logging import fail as core_fail
from ..core.logging import info as core_info
from ..core.logging import ok as core_ok
from ..core.logging import warn as core_warn

EXIT_THRESHOLD_REACHED = 1
EXIT_FATAL = 2


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = EXIT_FATAL) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = exit_code


@dataclass(slots=True)
class CLILogger:
    """Adapter around project logging helpers respecting CLI emoji settings."""

    use_emoji: bool = True

    def fail(self, message: str) -> None:
        """Log a failure message honouring emoji preferences."""

        core_fail(message, use_emoji=self.use_emoji)

    def warn(self, message: str) -> None:
        """Log a warning message honouring emoji preferences."""

        core_warn(message, use_emoji=self.use_emoji)

    def ok(self, message: str) -> None:
        """Log a success message honouring emoji preferences."""

        core_ok(message, use_emoji=self.use_emoji)

    def info(self, message: str) -> None:
        """Log an informational message honouring emoji preferences."""

        core_info(message, use_emoji=self.use_emoji)


__all__ = ["CLIError", "CLILogger", "EXIT_FATAL", "EXIT_THRESHOLD_REACHED"]
