# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Producer-agnostic annotation model, ordering and wire encoding."""
