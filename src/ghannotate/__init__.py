# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Annotate GitHub Actions from the JSON output of Cargo commands."""

from __future__ import annotations

from .core.annotation_set import AnnotationSet
from .core.models import Annotation
from .core.severity import Severity

__version__ = "0.3.0"

__all__ = ["Annotation", "AnnotationSet", "Severity", "__version__"]
