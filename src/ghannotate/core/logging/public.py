# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing logging helpers with optional colour and emoji support.

Standard output carries the workflow commands read by the GitHub runner, so
every message rendered here goes to standard error.
"""

from __future__ import annotations

import logging
import sys
from functools import lru_cache

from rich.console import Console
from rich.text import Text

PACKAGE_LOGGER_NAME = "ghannotate"


def detect_tty() -> bool:
    """Return ``True`` when stderr appears to be backed by a terminal.

    Returns:
        bool: ``True`` when ``sys.stderr`` reports TTY support.
    """

    try:
        return sys.stderr.isatty()
    except (AttributeError, ValueError):
        return False


@lru_cache(maxsize=4)
def get_console(*, color: bool = True, emoji: bool = True) -> Console:
    """Return a Rich console bound to standard error.

    Args:
        color: ``True`` when ANSI colour output should be enabled.
        emoji: ``True`` when Rich should render emoji glyphs.

    Returns:
        Console: Cached console matching the preferences.
    """

    tty = detect_tty()
    return Console(
        stderr=True,
        color_system="auto" if color and tty else None,
        no_color=not (color and tty),
        emoji=emoji,
        highlight=False,
        soft_wrap=True,
    )


def emoji(symbol: str, enable: bool) -> str:
    """Return ``symbol`` when emoji output is enabled, otherwise blank."""

    return symbol if enable else ""


def _print_line(msg: str, *, style: str, use_emoji: bool) -> None:
    console = get_console(emoji=use_emoji)
    text = Text(msg)
    text.stylize(style)
    console.print(text)


def info(msg: str, *, use_emoji: bool = True) -> None:
    """Emit an informational message.

    Args:
        msg: Message text to display.
        use_emoji: Flag indicating whether emoji output is desired.
    """

    _print_line(f"{emoji('ℹ️ ', use_emoji)}{msg}", style="cyan", use_emoji=use_emoji)


def ok(msg: str, *, use_emoji: bool = True) -> None:
    """Emit a success message.

    Args:
        msg: Message text to display.
        use_emoji: Flag indicating whether emoji output is desired.
    """

    _print_line(f"{emoji('✅ ', use_emoji)}{msg}", style="green", use_emoji=use_emoji)


def warn(msg: str, *, use_emoji: bool = True) -> None:
    """Emit a warning message.

    Args:
        msg: Message text to display.
        use_emoji: Flag indicating whether emoji output is desired.
    """

    _print_line(f"{emoji('⚠️ ', use_emoji)}{msg}", style="yellow", use_emoji=use_emoji)


def fail(msg: str, *, use_emoji: bool = True) -> None:
    """Emit an error message.

    Args:
        msg: Message text to display.
        use_emoji: Flag indicating whether emoji output is desired.
    """

    _print_line(f"{emoji('❌ ', use_emoji)}{msg}", style="red", use_emoji=use_emoji)


def configure_debug_logging(enabled: bool) -> None:
    """Stream package debug records to stderr when ``enabled`` is set.

    Args:
        enabled: ``True`` to attach a stderr handler at ``DEBUG`` level.
    """

    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    if not enabled or getattr(logger, "_ghannotate_debug_configured", False):
        return
    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(logging.Formatter("[debug] %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    setattr(logger, "_ghannotate_debug_configured", True)


__all__ = [
    "PACKAGE_LOGGER_NAME",
    "configure_debug_logging",
    "detect_tty",
    "emoji",
    "fail",
    "get_console",
    "info",
    "ok",
    "warn",
]
