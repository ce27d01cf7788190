"""Selection and viewport state for the results list."""

from __future__ import annotations

import logging

from tvpick.input import Input

logger = logging.getLogger("tvpick.picker")

# Rows of the list widget taken by its top and bottom border.
RESERVED_ROWS = 2


def _last_content_row(height: int) -> int:
    """Relative index of the last row that can hold an entry."""
    return max(height - RESERVED_ROWS - 1, 0)


class Picker:
    """Tracks the selected entry and the window of entries on screen.

    Three coordinates are kept in step:
        selected: absolute index into the current results
        relative_selected: index of the selection inside the visible window
        view_offset: absolute index of the first visible row

    so that ``selected == view_offset + relative_selected`` after every move.
    ``total_items`` and ``height`` are passed on each call because the result
    list and the terminal can both change between key presses.

    Moving "next" walks towards index 0 and "previous" walks away from it.
    An inverted picker swaps the two.
    """

    def __init__(self, inverted: bool = False):
        self._selected: int | None = None
        self._relative_selected: int | None = None
        self.view_offset = 0
        self._inverted = inverted
        self.input = Input()

    def __repr__(self) -> str:
        return (
            f"Picker(selected={self._selected}, relative_selected={self._relative_selected}, "
            f"view_offset={self.view_offset}, inverted={self._inverted})"
        )

    @property
    def is_inverted(self) -> bool:
        return self._inverted

    def inverted(self) -> Picker:
        """Return a fresh picker with the orientation flipped."""
        return Picker(inverted=not self._inverted)

    def reset_selection(self) -> None:
        """Go back to the first entry. Call whenever the results are replaced."""
        self._selected = 0
        self._relative_selected = 0
        self.view_offset = 0

    def reset_input(self) -> None:
        self.input.reset()

    def selected(self) -> int | None:
        return self._selected

    def select(self, index: int | None) -> None:
        """Set the absolute selection. Not validated."""
        self._selected = index

    def relative_selected(self) -> int | None:
        return self._relative_selected

    def relative_select(self, index: int | None) -> None:
        """Set the selection inside the window. Not validated."""
        self._relative_selected = index

    def advance(self, total_items: int, height: int) -> None:
        """Move to the next entry, wrapping at the end of the list."""
        if total_items <= 0:
            logger.debug("advance ignored: no results")
            return
        if self._inverted:
            self._step_up(total_items, height)
        else:
            self._step_down(total_items, height)

    def retreat(self, total_items: int, height: int) -> None:
        """Move to the previous entry, wrapping at the start of the list."""
        if total_items <= 0:
            logger.debug("retreat ignored: no results")
            return
        if self._inverted:
            self._step_down(total_items, height)
        else:
            self._step_up(total_items, height)

    def _current(self, total_items: int) -> tuple[int, int]:
        """Selection and relative index, clamped to a list that may have shrunk."""
        selected = min(self._selected or 0, total_items - 1)
        relative = min(self._relative_selected or 0, selected)
        return selected, relative

    def _place(self, selected: int, relative: int) -> None:
        self._selected = selected
        self._relative_selected = relative
        self.view_offset = max(selected - relative, 0)

    def _step_down(self, total_items: int, height: int) -> None:
        """Step towards index 0; from index 0 wrap to the last entry."""
        selected, relative = self._current(total_items)
        last_row = _last_content_row(height)

        if selected > 0:
            # At the top row the window scrolls up with the selection.
            relative = min(max(relative - 1, 0), last_row)
            self._place(selected - 1, relative)
            return

        # Wrap: show the tail of the list with the last entry on the last row,
        # or on its own row when the whole list fits.
        selected = total_items - 1
        self._place(selected, min(last_row, selected))
        logger.debug("wrapped to end: selected=%d view_offset=%d", selected, self.view_offset)

    def _step_up(self, total_items: int, height: int) -> None:
        """Step away from index 0; past the last entry wrap to index 0."""
        selected, relative = self._current(total_items)
        last_row = _last_content_row(height)
        new_index = (selected + 1) % total_items

        if new_index == 0:
            self._place(0, 0)
            logger.debug("wrapped to start")
            return

        if relative >= last_row:
            # Selection sat on the last row: scroll the window down by one.
            self._place(new_index, min(new_index, last_row))
        else:
            self._place(new_index, min(relative + 1, new_index))
