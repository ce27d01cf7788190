"""Interactive picker loop."""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

import readchar
from rich.console import Console, Group
from rich.live import Live

from tvpick.picker import RESERVED_ROWS, Picker

from .panel_builder import (
    INPUT_PANEL_HEIGHT,
    build_input_panel,
    build_results_panel,
    content_rows,
    visible_window,
)

if TYPE_CHECKING:
    from tvpick.channels import Channel
    from tvpick.config import Config
    from tvpick.models import Entry

logger = logging.getLogger("tvpick.ui")

# UI Constants
LIVE_REFRESH_RATE = 20
DEFAULT_TERMINAL_HEIGHT = 24

NEXT_KEYS = frozenset({readchar.key.DOWN, readchar.key.CTRL_N})
PREV_KEYS = frozenset({readchar.key.UP, readchar.key.CTRL_P, readchar.key.CTRL_K})
ACCEPT_KEYS = frozenset({readchar.key.ENTER, "\r", "\n"})
CANCEL_KEYS = frozenset({readchar.key.ESC, readchar.key.CTRL_C})
BACKSPACE_KEYS = frozenset({readchar.key.BACKSPACE, readchar.key.CTRL_H})


class KeyResult(Enum):
    """What the loop should do after a key press."""

    CONTINUE = "continue"
    ACCEPT = "accept"
    CANCEL = "cancel"


class PickerSession:
    """Binds a channel, a picker and the terminal size together.

    Every key press passes the current result count and list height to the
    picker, and every query change resets the selection to the first result.
    """

    def __init__(
        self,
        channel: Channel,
        config: Config,
        picker: Picker | None = None,
        console: Console | None = None,
    ):
        self.channel = channel
        self.config = config
        self.picker = picker or Picker(inverted=bool(config.inverted))
        self.console = console or Console(stderr=True)
        self.picker.reset_selection()

    def total_height(self) -> int:
        height = self.console.height or DEFAULT_TERMINAL_HEIGHT
        if self.config.height and self.config.height > 0:
            height = min(height, int(self.config.height))
        return height

    def results_height(self) -> int:
        """Height of the results panel, borders included."""
        return max(self.total_height() - INPUT_PANEL_HEIGHT, RESERVED_ROWS)

    def _query_changed(self) -> None:
        self.channel.find(self.picker.input.value)
        self.picker.reset_selection()

    def handle_key(self, key: str) -> KeyResult:
        picker = self.picker

        if key in ACCEPT_KEYS:
            return KeyResult.ACCEPT
        if key in CANCEL_KEYS:
            return KeyResult.CANCEL
        if key in NEXT_KEYS:
            picker.advance(self.channel.result_count(), self.results_height())
        elif key in PREV_KEYS:
            picker.retreat(self.channel.result_count(), self.results_height())
        elif key in BACKSPACE_KEYS:
            if picker.input.backspace():
                self._query_changed()
        elif key == readchar.key.CTRL_W:
            if picker.input.delete_word():
                self._query_changed()
        elif key == readchar.key.CTRL_U:
            picker.reset_input()
            self._query_changed()
        elif len(key) == 1 and key.isprintable():
            picker.input.insert(key)
            self._query_changed()
        else:
            logger.debug("unbound key %r", key)
        return KeyResult.CONTINUE

    def selected_entry(self) -> Entry | None:
        index = self.picker.selected()
        if index is None:
            return None
        return self.channel.get_result(index)

    def _window(self, height: int) -> tuple[int, int, int]:
        """Rows to draw and the selected row inside them.

        The picker's coordinates can be stale when the terminal was resized
        or the results changed without a key press; the window is moved to
        keep the selection on screen.
        """
        total = self.channel.result_count()
        rows = content_rows(height)
        start, end = visible_window(self.picker.view_offset, total, height)
        selected = min(self.picker.selected() or 0, max(total - 1, 0))
        if selected < start:
            start, end = visible_window(selected, total, height)
        elif selected >= end and rows:
            start, end = visible_window(selected - rows + 1, total, height)
        relative = min(max(selected - start, 0), max(end - start - 1, 0))
        return start, end, relative

    def render(self) -> Group:
        height = self.results_height()
        width = self.console.width
        start, end, relative = self._window(height)
        results = build_results_panel(
            self.channel.results(end - start, start),
            relative,
            height,
            inverted=self.picker.is_inverted,
            view_offset=start,
            total_items=self.channel.result_count(),
            width=width,
            highlight_style=self.config.highlight_style,
            selected_style=self.config.selected_style,
            marker=self.config.marker,
        )
        prompt = build_input_panel(
            self.picker.input.value,
            self.channel.result_count(),
            self.channel.total_count(),
            width=width,
        )
        if self.picker.is_inverted:
            return Group(prompt, results)
        return Group(results, prompt)


def run_picker(
    channel: Channel,
    config: Config,
    console: Console | None = None,
) -> str | None:
    """Run the picker until the user accepts or cancels.

    Returns:
        The chosen entry's name, or None if cancelled or nothing matched.
    """
    session = PickerSession(channel, config, console=console)

    with Live(
        session.render(),
        console=session.console,
        refresh_per_second=LIVE_REFRESH_RATE,
        transient=True,
    ) as live:
        while True:
            try:
                key = readchar.readkey()
            except KeyboardInterrupt:
                return None

            result = session.handle_key(key)
            if result is KeyResult.CANCEL:
                return None
            if result is KeyResult.ACCEPT:
                entry = session.selected_entry()
                logger.debug("accepted %r", entry)
                return entry.name if entry else None

            live.update(session.render())
