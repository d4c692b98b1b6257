# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Ordered, deduplicating container for annotations."""

from __future__ import annotations

import bisect
from collections.abc import Iterable, Iterator

from .models import Annotation


class AnnotationSet:
    """Keep unique annotations in their total order.

    Membership uses structural equality; iteration follows
    :meth:`Annotation.sort_key` regardless of insertion order.
    """

    def __init__(self, annotations: Iterable[Annotation] = ()) -> None:
        self._members: set[Annotation] = set()
        self._ordered: list[Annotation] = []
        for annotation in annotations:
            self.add(annotation)

    def add(self, annotation: Annotation) -> bool:
        """Insert ``annotation`` unless an equal one is already present.

        Args:
            annotation: Annotation to insert.

        Returns:
            bool: ``True`` when the annotation was new, ``False`` for duplicates.
        """

        if annotation in self._members:
            return False
        self._members.add(annotation)
        bisect.insort(self._ordered, annotation, key=Annotation.sort_key)
        return True

    def __contains__(self, annotation: object) -> bool:
        return annotation in self._members

    def __iter__(self) -> Iterator[Annotation]:
        return iter(self._ordered)

    def __len__(self) -> int:
        return len(self._ordered)

    def __repr__(self) -> str:
        return f"AnnotationSet({self._ordered!r})"


__all__ = ["AnnotationSet"]
