"""Channel protocol for swappable result sources."""

from typing import Protocol

from tvpick.models import Entry


class Channel(Protocol):
    """Source of entries that the picker navigates."""

    def find(self, pattern: str) -> None:
        """Filter entries with a new query."""
        ...

    def results(self, num_entries: int, offset: int) -> list[Entry]:
        """Return up to num_entries results starting at offset."""
        ...

    def get_result(self, index: int) -> Entry | None:
        """Return the result at an absolute index, or None if out of range."""
        ...

    def result_count(self) -> int:
        """Number of entries matching the current query."""
        ...

    def total_count(self) -> int:
        """Number of entries regardless of the query."""
        ...

    def shutdown(self) -> None:
        ...
