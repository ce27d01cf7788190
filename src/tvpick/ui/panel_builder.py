"""Shared utilities for building the picker's Rich panels."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from tvpick.picker import RESERVED_ROWS

from .formatting import (
    DEFAULT_HIGHLIGHT_STYLE,
    DEFAULT_SELECTED_STYLE,
    format_count,
    highlight_entry,
)

if TYPE_CHECKING:
    from tvpick.models import Entry

INPUT_PANEL_HEIGHT = 3


def content_rows(height: int) -> int:
    """Rows available for entries in a list panel of the given height."""
    return max(height - RESERVED_ROWS, 0)


def visible_window(view_offset: int, total_items: int, height: int) -> tuple[int, int]:
    """Calculate which results are on screen.

    Args:
        view_offset: Absolute index of the first visible row
        total_items: Number of results
        height: Panel height including borders

    Returns:
        Tuple of (start, end) absolute indices, end exclusive
    """
    if total_items == 0:
        return 0, 0
    start = max(0, min(view_offset, total_items - 1))
    end = min(start + content_rows(height), total_items)
    return start, end


def format_scroll_indicator(hidden_above: int, hidden_below: int) -> tuple[str | None, str | None]:
    """Format scroll indicators.

    Returns:
        Tuple of (above_indicator, below_indicator) - None if no items hidden
    """
    above = f"[dim]↑ {hidden_above} more[/dim]" if hidden_above > 0 else None
    below = f"[dim]↓ {hidden_below} more[/dim]" if hidden_below > 0 else None
    return above, below


def build_results_panel(
    entries: list[Entry],
    relative_selected: int | None,
    height: int,
    *,
    inverted: bool = False,
    view_offset: int = 0,
    total_items: int | None = None,
    width: int | None = None,
    highlight_style: str = DEFAULT_HIGHLIGHT_STYLE,
    selected_style: str = DEFAULT_SELECTED_STYLE,
    marker: str = ">",
) -> Panel:
    """Build the results list as a Panel exactly ``height`` rows tall.

    ``entries`` are the rows starting at ``view_offset``. The default
    orientation draws them bottom-up so the first result sits right above the
    prompt; an inverted picker draws them top-down under the prompt.
    """
    rows = content_rows(height)
    lines: list[Text] = [
        highlight_entry(
            entry,
            selected=i == relative_selected,
            highlight_style=highlight_style,
            selected_style=selected_style,
            marker=marker,
        )
        for i, entry in enumerate(entries[:rows])
    ]
    padding = [Text("") for _ in range(rows - len(lines))]
    if inverted:
        lines = lines + padding
    else:
        lines = padding + lines[::-1]

    total = len(entries) if total_items is None else total_items
    hidden_before = view_offset
    hidden_after = max(total - view_offset - len(entries[:rows]), 0)
    if inverted:
        above, below = format_scroll_indicator(hidden_before, hidden_after)
    else:
        above, below = format_scroll_indicator(hidden_after, hidden_before)

    return Panel(
        Text("\n", no_wrap=True, overflow="ellipsis").join(lines),
        title=above,
        subtitle=below,
        border_style="blue",
        width=width,
        height=max(height, RESERVED_ROWS),
    )


def build_input_panel(query: str, matched: int, total: int, width: int | None = None) -> Panel:
    """Build the prompt box with the matched/total counter."""
    return Panel(
        f"[cyan]>[/cyan] {escape(query)}[blink]_[/blink]",
        subtitle=format_count(matched, total),
        subtitle_align="right",
        border_style="blue",
        width=width,
        height=INPUT_PANEL_HEIGHT,
    )
