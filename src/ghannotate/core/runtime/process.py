# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Safe wrappers around ``subprocess`` execution."""

from __future__ import annotations

import logging
import shutil

# Bandit: subprocess usage is intentional; we launch Cargo from an argument
# list and never enable ``shell=True``.
import subprocess  # nosec B404
from collections.abc import Sequence
from pathlib import Path
from subprocess import CompletedProcess

LOGGER = logging.getLogger(__name__)


class CommandLaunchError(RuntimeError):
    """Raised when the producer command cannot be started at all."""

    def __init__(self, command: Sequence[str], reason: str) -> None:
        """Initialise the error with the command that failed to launch.

        Args:
            command: Command sequence that was requested.
            reason: Human-readable description of the failure.
        """

        super().__init__(f"Failed to launch '{command[0] if command else '<empty>'}': {reason}")
        self.command = tuple(command)
        self.reason = reason


def _normalize_args(args: Sequence[str]) -> list[str]:
    """Resolve the executable of ``args`` against ``PATH``.

    Args:
        args: Raw command arguments supplied by the caller.

    Returns:
        list[str]: Argument list whose first element is an executable path.

    Raises:
        CommandLaunchError: If no arguments are provided or the executable is missing.
    """

    if not args:
        raise CommandLaunchError(args, "command requires at least one argument")

    head, *rest = args
    head_path = Path(head)
    if head_path.is_absolute():
        return [str(head_path), *rest]

    resolved = shutil.which(head)
    if resolved is None:
        raise CommandLaunchError(args, "executable was not found on PATH")
    return [resolved, *rest]


def run_command(
    args: Sequence[str],
    *,
    cwd: Path | None = None,
) -> CompletedProcess[str]:
    """Run ``args`` to completion and capture its standard output.

    Standard input is closed and standard error is inherited so the producer's
    progress output stays visible in the job log. A non-zero exit status is
    returned to the caller unchanged.

    Args:
        args: Command and arguments to execute.
        cwd: Optional working directory.

    Returns:
        CompletedProcess[str]: Completed process with ``stdout`` captured as text.

    Raises:
        CommandLaunchError: If the command could not be started.
    """

    normalized = _normalize_args(args)
    LOGGER.debug("running %s", " ".join(normalized))
    try:
        # Bandit: the argument list comes from the CLI and is never shell-expanded.
        completed: CompletedProcess[str] = subprocess.run(  # nosec B603
            normalized,
            cwd=str(cwd) if cwd is not None else None,
            check=False,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=None,
            text=True,
            encoding="utf-8",
            errors="replace",
        )
    except OSError as exc:
        raise CommandLaunchError(normalized, str(exc)) from exc
    LOGGER.debug("%s exited with status %d", normalized[0], completed.returncode)
    return completed


__all__ = ["CommandLaunchError", "run_command"]
