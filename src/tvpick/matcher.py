"""Fuzzy matching of a query against candidate lines."""

from __future__ import annotations

from dataclasses import dataclass, field

from rapidfuzz import fuzz, process
from rapidfuzz.distance import LCSseq


@dataclass(frozen=True)
class MatchResult:
    """Score and matched character positions for one candidate."""

    score: float
    indices: tuple[int, ...]


@dataclass(frozen=True)
class MatchedItem:
    """A candidate that survived the current pattern."""

    matched_string: str
    match_indices: tuple[int, ...] = ()
    score: float = 0


def _fold(text: str, case_sensitive: bool) -> str:
    """Lowercase one character at a time so positions line up with ``text``.

    ``str.lower`` can grow a string ('İ' becomes two code points), which would
    shift every index after it.
    """
    if case_sensitive:
        return text
    return "".join(ch.lower()[:1] for ch in text)


def _is_case_sensitive(pattern: str) -> bool:
    return any(ch.isupper() for ch in pattern)


def _token_indices(needle: str, haystack: str) -> list[int] | None:
    """Positions in haystack of an in-order match of every needle character."""
    if LCSseq.similarity(needle, haystack) < len(needle):
        return None
    indices: list[int] = []
    for op in LCSseq.opcodes(needle, haystack):
        if op.tag == "equal":
            indices.extend(range(op.dest_start, op.dest_end))
    return indices


def fuzzy_match(pattern: str, text: str) -> MatchResult | None:
    """Match a pattern against text.

    Space-separated tokens must each appear in text as a subsequence. Matching
    ignores case unless the pattern contains an uppercase letter.

    Returns:
        MatchResult with a ``fuzz.WRatio`` score and the sorted unique
        indices into ``text``, or None if any token fails to match.
    """
    tokens = pattern.split()
    if not tokens:
        return MatchResult(score=0, indices=())

    case_sensitive = _is_case_sensitive(pattern)
    haystack = _fold(text, case_sensitive)
    indices: set[int] = set()
    for token in tokens:
        found = _token_indices(_fold(token, case_sensitive), haystack)
        if found is None:
            return None
        indices.update(found)

    query = _fold(" ".join(tokens), case_sensitive)
    return MatchResult(score=fuzz.WRatio(query, haystack), indices=tuple(sorted(indices)))


@dataclass
class Matcher:
    """Holds candidates and the results for the last pattern.

    Example:
        matcher = Matcher(["src/main.py", "README.md"])
        matcher.find("main")
        matcher.results(10, 0)  # [MatchedItem("src/main.py", (4, 5, 6, 7), ...)]
    """

    items: list[str] = field(default_factory=list)
    pattern: str = ""
    _matches: list[MatchedItem] | None = field(default=None, init=False, repr=False)

    def push(self, item: str) -> None:
        self.items.append(item)
        self._matches = None

    def find(self, pattern: str) -> None:
        """Set the active pattern. Results are recomputed lazily."""
        if pattern != self.pattern:
            self.pattern = pattern
            self._matches = None

    def _refresh(self) -> list[MatchedItem]:
        if self._matches is not None:
            return self._matches

        tokens = self.pattern.split()
        if not tokens:
            self._matches = [MatchedItem(item) for item in self.items]
            return self._matches

        case_sensitive = _is_case_sensitive(self.pattern)
        choices = {i: _fold(item, case_sensitive) for i, item in enumerate(self.items)}
        # (choice, score, key) best first; equal scores keep insertion order
        ranked = process.extract(
            _fold(" ".join(tokens), case_sensitive),
            choices,
            scorer=fuzz.WRatio,
            limit=None,
        )

        matches: list[MatchedItem] = []
        for _, score, key in ranked:
            item = self.items[key]
            result = fuzzy_match(self.pattern, item)
            if result is not None:
                matches.append(MatchedItem(item, result.indices, score))
        self._matches = matches
        return self._matches

    @property
    def matched_item_count(self) -> int:
        return len(self._refresh())

    @property
    def total_item_count(self) -> int:
        return len(self.items)

    def results(self, num_entries: int, offset: int) -> list[MatchedItem]:
        """Return up to num_entries matches starting at offset."""
        if num_entries <= 0:
            return []
        return self._refresh()[offset : offset + num_entries]

    def get_result(self, index: int) -> MatchedItem | None:
        matches = self._refresh()
        if 0 <= index < len(matches):
            return matches[index]
        return None
