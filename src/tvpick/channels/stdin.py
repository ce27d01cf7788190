"""Channel reading candidate lines from a stream."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from tvpick.matcher import Matcher, MatchedItem
from tvpick.models import Entry, PreviewType

logger = logging.getLogger("tvpick.channels.stdin")


class StdinChannel:
    """Entries read once from stdin (or any text stream).

    Blank lines are skipped. Lines are stored last-first so that the
    bottom-up results list reads in input order.
    """

    def __init__(self, stream: TextIO | None = None, preview_type: PreviewType | None = None):
        self.preview_type = preview_type or PreviewType.BASIC
        self._matcher = Matcher()

        source = stream if stream is not None else sys.stdin
        lines = [line.rstrip("\r\n") for line in source]
        lines = [line for line in lines if line.strip()]
        for line in reversed(lines):
            self._matcher.push(line)
        logger.debug("read %d lines", len(lines))

    def _to_entry(self, item: MatchedItem) -> Entry:
        return Entry(item.matched_string, self.preview_type).with_name_match_ranges(
            item.match_indices
        )

    def find(self, pattern: str) -> None:
        self._matcher.find(pattern)

    def results(self, num_entries: int, offset: int) -> list[Entry]:
        return [self._to_entry(item) for item in self._matcher.results(num_entries, offset)]

    def get_result(self, index: int) -> Entry | None:
        item = self._matcher.get_result(index)
        if item is None:
            return None
        return Entry(item.matched_string, self.preview_type)

    def result_count(self) -> int:
        return self._matcher.matched_item_count

    def total_count(self) -> int:
        return self._matcher.total_item_count

    def shutdown(self) -> None:
        pass
