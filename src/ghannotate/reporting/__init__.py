# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Job summary writers for each producer format."""

from __future__ import annotations

from .summary import NullSummaryWriter, SummaryWriter, write_summary_file

__all__ = ["NullSummaryWriter", "SummaryWriter", "write_summary_file"]
