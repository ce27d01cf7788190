"""UI module."""

from .interactive import KeyResult, PickerSession, run_picker
from .panel_builder import (
    build_input_panel,
    build_results_panel,
    format_scroll_indicator,
    visible_window,
)

__all__ = [
    "KeyResult",
    "PickerSession",
    "build_input_panel",
    "build_results_panel",
    "format_scroll_indicator",
    "run_picker",
    "visible_window",
]
