"""Rendering for the picker: ANSI helpers, highlighting, and frames."""

from .frame import (
    build_frame,
    build_non_interactive_preview,
    draw_frame,
    key_hint,
    render_action_bar,
    render_list_item,
    render_list_lines,
    visible_range,
)
from .highlight import highlight_item_text, highlight_matches

__all__ = [
    "build_frame",
    "build_non_interactive_preview",
    "draw_frame",
    "highlight_item_text",
    "highlight_matches",
    "key_hint",
    "render_action_bar",
    "render_list_item",
    "render_list_lines",
    "visible_range",
]
