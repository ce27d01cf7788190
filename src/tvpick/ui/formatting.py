"""Shared formatting utilities for result rows and counters."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.text import Text

if TYPE_CHECKING:
    from tvpick.models import Entry

DEFAULT_HIGHLIGHT_STYLE = "bold yellow"
DEFAULT_SELECTED_STYLE = "bold cyan"


def highlight_entry(
    entry: Entry,
    selected: bool = False,
    highlight_style: str = DEFAULT_HIGHLIGHT_STYLE,
    selected_style: str = DEFAULT_SELECTED_STYLE,
    marker: str = ">",
) -> Text:
    """Render an entry as a single row.

    Args:
        entry: Entry to render
        selected: Whether the row is the current selection
        highlight_style: Style applied to matched character ranges
        selected_style: Style applied to the whole row when selected
        marker: Prefix shown on the selected row

    Returns:
        Rich Text with the marker, the name and styled match ranges
    """
    prefix = f"{marker} " if selected else " " * (len(marker) + 1)
    text = Text(prefix, style=selected_style if selected else "")
    name = Text(entry.name, style=selected_style if selected else "")
    for start, end in entry.name_match_ranges:
        name.stylize(highlight_style, start, end)
    text.append_text(name)
    text.no_wrap = True
    text.overflow = "ellipsis"
    return text


def format_count(matched: int, total: int) -> str:
    """Format the matched/total counter as Rich markup."""
    return f"[dim]{matched}/{total}[/dim]"
