# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Runtime helpers for launching the producer subprocess."""

from __future__ import annotations

from .process import CommandLaunchError, run_command

__all__ = ["CommandLaunchError", "run_command"]
