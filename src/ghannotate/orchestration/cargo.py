# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Construction and launch of the Cargo commands that produce records."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from pathlib import Path
from subprocess import CompletedProcess

from ..constants import FORMAT_TOOLCHAIN, MESSAGE_FORMAT_FLAG
from ..core.runtime.process import run_command
from ..parsers.base import MessageKind


class CargoSubcommand(str, Enum):
    """Cargo subcommands whose output can be annotated."""

    CHECK = "check"
    CLIPPY = "clippy"
    BUILD = "build"
    FMT = "fmt"

    @property
    def message_kind(self) -> MessageKind:
        """Return the record format printed by this subcommand."""

        if self is CargoSubcommand.FMT:
            return MessageKind.FORMAT_MISMATCH
        return MessageKind.DIAGNOSTIC


def build_cargo_command(subcommand: CargoSubcommand, cargo: str, args: Sequence[str] = ()) -> list[str]:
    """Return the argument list that runs ``subcommand`` with JSON output.

    ``fmt`` goes through ``rustup`` because JSON output needs a nightly toolchain.

    Args:
        subcommand: Cargo subcommand to run.
        cargo: Cargo executable used for every subcommand except ``fmt``.
        args: Extra arguments forwarded verbatim.

    Returns:
        list[str]: Command suitable for :func:`run_command`.
    """

    if subcommand is CargoSubcommand.FMT:
        head = ["rustup", "run", FORMAT_TOOLCHAIN, "cargo", subcommand.value]
    else:
        head = [cargo, subcommand.value]
    return [*head, MESSAGE_FORMAT_FLAG, *args]


def invoke_cargo(
    subcommand: CargoSubcommand,
    cargo: str,
    args: Sequence[str] = (),
    *,
    cwd: Path | None = None,
) -> CompletedProcess[str]:
    """Run ``subcommand`` to completion and capture its standard output.

    Raises:
        CommandLaunchError: If the command could not be started.
    """

    return run_command(build_cargo_command(subcommand, cargo, args), cwd=cwd)


__all__ = ["CargoSubcommand", "build_cargo_command", "invoke_cargo"]
