"""Data models for tvpick."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum


class PreviewType(Enum):
    """How an entry would be previewed."""

    BASIC = "basic"


def fold_ranges(indices: Iterable[int]) -> list[tuple[int, int]]:
    """Fold character indices into half-open (start, end) ranges.

    >>> fold_ranges([0, 1, 2, 5, 7, 8])
    [(0, 3), (5, 6), (7, 9)]
    """
    ranges: list[tuple[int, int]] = []
    for i in sorted(set(indices)):
        if ranges and ranges[-1][1] == i:
            ranges[-1] = (ranges[-1][0], i + 1)
        else:
            ranges.append((i, i + 1))
    return ranges


@dataclass(frozen=True)
class Entry:
    """A result row as shown in the picker."""

    name: str
    preview_type: PreviewType = PreviewType.BASIC
    name_match_ranges: list[tuple[int, int]] = field(default_factory=list)

    def with_name_match_ranges(self, indices: Iterable[int]) -> Entry:
        """Return a copy with ranges built from matched character indices."""
        return Entry(self.name, self.preview_type, fold_ranges(indices))
