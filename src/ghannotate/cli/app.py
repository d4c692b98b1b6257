# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring the Cargo subcommands."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Annotated, Final

import typer

from ..config import AnnotateConfig, ConfigError
from ..constants import CARGO_ENV, CARGO_SUBCOMMAND_NAME
from ..core.logging import configure_debug_logging
from ..core.runtime.process import CommandLaunchError
from ..orchestration.annotator import RunResult, annotate_output
from ..orchestration.cargo import CargoSubcommand, invoke_cargo
from ..parsers.registry import message_format
from ..parsers.rustc import MissingPrimarySpanError
from .shared import EXIT_THRESHOLD_REACHED, CLIError, CLILogger

PROG_NAME: Final[str] = "cargo-ghannotate"
SEPARATOR: Final[str] = "--"
PASSTHROUGH_SETTINGS: Final[dict[str, bool]] = {
    "allow_extra_args": True,
    "ignore_unknown_options": True,
}

CARGO_OPTION = Annotated[
    str | None,
    typer.Option(
        "--cargo",
        envvar=CARGO_ENV,
        metavar="PATH",
        help="Path to the cargo executable.",
        show_default=False,
    ),
]
ALLOW_WARNINGS_OPTION = Annotated[
    bool,
    typer.Option(
        "--allow-warnings",
        help="Do not fail the job when only warnings are reported.",
    ),
]
DEBUG_OPTION = Annotated[
    bool,
    typer.Option(
        "--debug",
        help="Log debug traces and write SUMMARY.md when no job summary path is set.",
    ),
]
EMOJI_OPTION = Annotated[
    bool,
    typer.Option("--emoji/--no-emoji", help="Toggle emoji in console messages."),
]

app = typer.Typer(
    name=PROG_NAME,
    help="Annotate GitHub Actions from the output of Cargo subcommands.",
    no_args_is_help=True,
    add_completion=False,
)


@dataclass(slots=True)
class CLIState:
    """Global options shared by every subcommand."""

    cargo: str | None
    allow_warnings: bool
    debug: bool
    logger: CLILogger


@app.callback()
def configure(
    ctx: typer.Context,
    cargo: CARGO_OPTION = None,
    allow_warnings: ALLOW_WARNINGS_OPTION = False,
    debug: DEBUG_OPTION = False,
    emoji: EMOJI_OPTION = True,
) -> None:
    """Annotate GitHub Actions from the output of Cargo subcommands."""

    configure_debug_logging(debug)
    ctx.obj = CLIState(
        cargo=cargo,
        allow_warnings=allow_warnings,
        debug=debug,
        logger=CLILogger(use_emoji=emoji),
    )


def _annotate(ctx: typer.Context, subcommand: CargoSubcommand) -> None:
    """Run ``subcommand`` and translate its output into annotations.

    Args:
        ctx: Typer context carrying :class:`CLIState` and passthrough arguments.
        subcommand: Cargo subcommand to run.

    Raises:
        typer.Exit: With status 1 when the failure threshold is reached, or the
            status carried by a :class:`CLIError`.
    """

    state: CLIState = ctx.obj
    try:
        config, result = _execute(state, subcommand, list(ctx.args))
    except CLIError as exc:
        state.logger.fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc

    if result.failed(config.threshold) and result.max_severity is not None:
        state.logger.fail(f"{result.emitted} annotation(s) emitted; highest severity: {result.max_severity.value}")
        raise typer.Exit(code=EXIT_THRESHOLD_REACHED)
    if result.emitted:
        state.logger.warn(f"{result.emitted} annotation(s) emitted below the failure threshold")
    else:
        state.logger.ok("No annotations emitted")


def _execute(
    state: CLIState,
    subcommand: CargoSubcommand,
    args: Sequence[str],
) -> tuple[AnnotateConfig, RunResult]:
    """Build the configuration, launch Cargo and annotate its output.

    Raises:
        CLIError: If configuration is invalid, Cargo cannot be launched or a
            record violates the producer contract.
    """

    try:
        config = AnnotateConfig.from_environment(
            cargo=state.cargo,
            allow_warnings=state.allow_warnings,
            debug=state.debug,
        )
        state.logger.info(f"Running cargo {subcommand.value} {' '.join(args)}".rstrip())
        completed = invoke_cargo(subcommand, config.cargo, args, cwd=config.base_dir)
        result = annotate_output(
            completed.stdout or "",
            message_format(subcommand.message_kind),
            stream=sys.stdout,
            summary_path=config.summary_path,
            base_dir=config.base_dir,
        )
    except (ConfigError, CommandLaunchError, MissingPrimarySpanError) as exc:
        raise CLIError(str(exc)) from exc
    return config, result


@app.command(context_settings=PASSTHROUGH_SETTINGS)
def check(ctx: typer.Context) -> None:
    """Run `cargo check` and annotate its output."""

    _annotate(ctx, CargoSubcommand.CHECK)


@app.command(context_settings=PASSTHROUGH_SETTINGS)
def clippy(ctx: typer.Context) -> None:
    """Run `cargo clippy` and annotate its output."""

    _annotate(ctx, CargoSubcommand.CLIPPY)


@app.command(context_settings=PASSTHROUGH_SETTINGS)
def build(ctx: typer.Context) -> None:
    """Run `cargo build` and annotate its output."""

    _annotate(ctx, CargoSubcommand.BUILD)


@app.command(context_settings=PASSTHROUGH_SETTINGS)
def fmt(ctx: typer.Context) -> None:
    """Run `cargo fmt` and annotate its output (requires a nightly toolchain)."""

    _annotate(ctx, CargoSubcommand.FMT)


def preserve_separator(args: Sequence[str]) -> list[str]:
    """Return ``args`` with the first ``--`` doubled.

    Click consumes one ``--`` while parsing; doubling it forwards the separator
    to Cargo so that arguments after it still reach the compiler driver.

    Args:
        args: Command line arguments excluding the program name.

    Returns:
        list[str]: Arguments ready for Click.
    """

    arguments = list(args)
    if SEPARATOR not in arguments:
        return arguments
    index = arguments.index(SEPARATOR)
    return [*arguments[:index], SEPARATOR, *arguments[index:]]


def main(argv: Sequence[str] | None = None) -> None:
    """Console script entry point.

    When run as ``cargo ghannotate``, Cargo passes the subcommand name as the
    first argument; it is dropped before parsing.

    Args:
        argv: Arguments excluding the program name; defaults to ``sys.argv[1:]``.
    """

    args = list(sys.argv[1:] if argv is None else argv)
    if args and args[0] == CARGO_SUBCOMMAND_NAME:
        args = args[1:]
    app(args=preserve_separator(args), prog_name=PROG_NAME)


__all__ = ["app", "main", "preserve_separator"]
