"""Frame composition for the picker.

Builds the search line, hint, optional header, the scrolling list viewport and
the action bar as plain lists of styled lines. Only ``draw_frame`` touches the
terminal.
"""

from __future__ import annotations

import os
from collections.abc import Sequence

from ..actions import Action
from ..runtime.state import SelectionConfig, SessionState
from ..ui_theme import PickerTheme, styled
from .ansi import CLEAR_SCREEN, clip_ansi_line, pad_ansi_line
from .highlight import highlight_item_text

LIST_INDENT = "  "
SELECTED_MARKER = "> "
PREVIEW_LIMIT = 5
SEARCH_PLACEHOLDER = "(type to search)"


def key_hint(allow_back: bool) -> str:
    esc_hint = "Esc to go back" if allow_back else "Esc to clear search"
    return f"Use arrow keys to navigate, Enter to select, {esc_hint}, Ctrl+C to exit"


def visible_range(total: int, current_index: int, viewport_rows: int) -> tuple[int, int]:
    """Return ``[start, end)`` of the window centred on ``current_index``."""
    rows = max(1, viewport_rows)
    start = max(0, current_index - rows // 2)
    end = min(total, start + rows)
    return start, end


def render_list_item(
    display_text: str,
    searchable_text: str,
    query: str,
    theme: PickerTheme,
    width: int,
    selected: bool = False,
) -> str:
    """Render one list row.

    The selected row carries a marker and a selection background padded to
    ``width`` columns; other rows are indented and left unfilled.
    """
    body = highlight_item_text(display_text, searchable_text, query, theme, selected)
    if not selected:
        return clip_ansi_line(f"{LIST_INDENT}{body}", width)
    row = clip_ansi_line(styled(SELECTED_MARKER, theme.selected, theme) + body, width)
    row = pad_ansi_line(row, width, theme.selected, theme.reset)
    return f"{row}{theme.reset}"


def render_list_lines(state: SessionState, config: SelectionConfig, width: int) -> list[str]:
    items = state.filtered_items
    if not items:
        return []
    start, end = visible_range(len(items), state.current_index, config.viewport_rows)
    return [
        render_list_item(
            config.display_text(items[idx]),
            config.search_text(items[idx]),
            state.search_term,
            config.theme,
            width,
            selected=idx == state.current_index,
        )
        for idx in range(start, end)
    ]


def render_action_bar(actions: Sequence[Action], selected_index: int, theme: PickerTheme) -> list[str]:
    """Return the action bar row and, when present, the selected description."""
    if not actions:
        return []
    labels: list[str] = []
    for idx, action in enumerate(actions):
        label = action.label.lower()
        if idx == selected_index:
            labels.append(styled(f"• {label}", theme.action_selected, theme))
        else:
            labels.append(styled(f"  {label}", theme.action_idle, theme))
    lines = ["  ".join(labels)]
    description = actions[selected_index].description
    if description:
        lines.append(styled(f"  {description}", theme.action_description, theme))
    return lines


def build_frame(state: SessionState, config: SelectionConfig, width: int) -> list[str]:
    """Compose every line of one interactive frame."""
    theme = config.theme
    term = state.search_term or styled(SEARCH_PLACEHOLDER, theme.search_placeholder, theme)
    lines = [
        f"{styled('Search:', theme.search_label, theme)} {term}",
        styled(key_hint(config.allow_back), theme.hint, theme),
        "",
    ]
    if config.header:
        lines.extend([styled(config.header, theme.header, theme), ""])

    if not state.filtered_items:
        lines.append(styled(f'No items found matching "{state.search_term}"', theme.empty_message, theme))
    else:
        lines.extend(render_list_lines(state, config, width))
        if state.active_actions:
            lines.append("")
            lines.extend(render_action_bar(state.active_actions, state.selected_action_index, theme))
    return [clip_ansi_line(line, width) for line in lines]


def draw_frame(fd: int, lines: Sequence[str]) -> None:
    """Clear the screen and write ``lines`` with raw-mode line endings."""
    out: list[str] = [CLEAR_SCREEN]
    for idx, line in enumerate(lines):
        if idx:
            out.append("\r\n")
        out.append(line)
        # Clipping may cut a trailing reset; never let a style bleed into the next row.
        if "\033" in line:
            out.append("\033[0m")
    os.write(fd, "".join(out).encode("utf-8", errors="replace"))


def build_non_interactive_preview(config: SelectionConfig) -> list[str]:
    """Static preview printed when no interactive terminal is attached."""
    items = list(config.items)
    lines = ["Search: (non-interactive mode)", key_hint(False)]
    if config.header:
        lines.extend(["", config.header, ""])
    for idx, item in enumerate(items[:PREVIEW_LIMIT]):
        marker = ">" if idx == 0 else " "
        lines.append(f"{marker} {config.display_text(item)}")
    if len(items) > PREVIEW_LIMIT:
        lines.append("  ... and more")
    return lines
