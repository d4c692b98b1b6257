# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Orchestration of a single annotation run."""

from __future__ import annotations

from .annotator import Annotator, RunResult, annotate_output

__all__ = ["Annotator", "RunResult", "annotate_output"]
