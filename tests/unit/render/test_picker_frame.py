"""Tests for picker frame composition.

Checks the centred viewport window, selected-row fill, action bar layout,
empty-result short-circuit, and the non-interactive preview.
"""

from __future__ import annotations

import unittest
from unittest import mock

from lazypick.actions import GlobalAction, ItemAction
from lazypick.render.frame import (
    build_frame,
    build_non_interactive_preview,
    draw_frame,
    key_hint,
    render_action_bar,
    render_list_item,
    visible_range,
)
from lazypick.runtime.state import SelectionConfig, SessionState
from lazypick.ui_theme import DEFAULT_THEME, PLAIN_THEME


def _config(items, **kwargs) -> SelectionConfig:
    kwargs.setdefault("theme", PLAIN_THEME)
    return SelectionConfig(items=items, render_item=str, **kwargs)


class VisibleRangeTests(unittest.TestCase):
    def test_window_is_centred_on_selection(self) -> None:
        self.assertEqual(visible_range(20, 10, 7), (7, 14))

    def test_window_is_clamped_at_list_start(self) -> None:
        self.assertEqual(visible_range(20, 1, 7), (0, 7))
        self.assertEqual(visible_range(3, -1, 7), (0, 3))

    def test_window_is_clamped_at_list_end(self) -> None:
        self.assertEqual(visible_range(20, 19, 7), (16, 20))


class ListRowTests(unittest.TestCase):
    def test_selected_row_fills_terminal_width(self) -> None:
        row = render_list_item("main", "main", "", PLAIN_THEME, width=10, selected=True)
        self.assertEqual(row, "> main    ")

    def test_selected_row_background_reaches_edge_with_color(self) -> None:
        row = render_list_item("main", "main", "", DEFAULT_THEME, width=10, selected=True)
        self.assertTrue(row.startswith(DEFAULT_THEME.selected))
        self.assertIn(f"{DEFAULT_THEME.selected}    {DEFAULT_THEME.reset}", row)

    def test_unselected_row_is_indented_without_fill(self) -> None:
        row = render_list_item("main", "main", "", PLAIN_THEME, width=10)
        self.assertEqual(row, "  main")

    def test_rows_are_clipped_to_width(self) -> None:
        row = render_list_item("a-very-long-branch-name", "x", "", PLAIN_THEME, width=8)
        self.assertEqual(row, "  a-very")


class ActionBarTests(unittest.TestCase):
    def test_selected_action_is_marked_and_described(self) -> None:
        actions = [
            ItemAction("checkout", "Checkout", lambda item: True, description="Switch to this branch"),
            GlobalAction("new", "New Branch", lambda: True),
        ]

        lines = render_action_bar(actions, 0, PLAIN_THEME)

        self.assertEqual(lines, ["• checkout    new branch", "  Switch to this branch"])

    def test_description_line_is_omitted_when_missing(self) -> None:
        actions = [
            ItemAction("checkout", "Checkout", lambda item: True, description="Switch"),
            GlobalAction("new", "New", lambda: True),
        ]

        lines = render_action_bar(actions, 1, PLAIN_THEME)

        self.assertEqual(lines, ["  checkout  • new"])

    def test_no_actions_renders_nothing(self) -> None:
        self.assertEqual(render_action_bar([], 0, PLAIN_THEME), [])


class BuildFrameTests(unittest.TestCase):
    def test_frame_has_search_hint_header_list_and_actions(self) -> None:
        actions = [GlobalAction("new", "New", lambda: True)]
        config = _config(["alpha", "beta"], header="Branches", actions=actions)
        state = SessionState(filtered_items=["alpha", "beta"], current_index=1, active_actions=actions)

        lines = build_frame(state, config, width=12)

        self.assertEqual(
            lines,
            [
                "Search: (typ",
                "Use arrow ke",
                "",
                "Branches",
                "",
                "  alpha",
                "> beta      ",
                "",
                "• new",
            ],
        )

    def test_search_term_is_echoed(self) -> None:
        config = _config(["alpha"])
        state = SessionState(search_term="al", filtered_items=["alpha"], current_index=0)

        lines = build_frame(state, config, width=80)

        self.assertEqual(lines[0], "Search: al")
        self.assertEqual(lines[1], key_hint(False))

    def test_back_hint_when_back_is_allowed(self) -> None:
        config = _config(["alpha"], allow_back=True)
        state = SessionState(filtered_items=["alpha"], current_index=0)

        lines = build_frame(state, config, width=120)

        self.assertIn("Esc to go back", lines[1])

    def test_empty_results_short_circuit_to_message(self) -> None:
        actions = [GlobalAction("new", "New", lambda: True)]
        config = _config(["alpha"], actions=actions)
        state = SessionState(search_term="zz", filtered_items=[], current_index=-1, active_actions=actions)

        lines = build_frame(state, config, width=80)

        self.assertEqual(lines[-1], 'No items found matching "zz"')
        self.assertNotIn("• new", lines)

    def test_viewport_limits_rendered_rows(self) -> None:
        items = [f"item{i}" for i in range(30)]
        config = _config(items, viewport_rows=5)
        state = SessionState(filtered_items=items, current_index=15)

        lines = build_frame(state, config, width=20)
        rows = lines[3:]

        self.assertEqual(len(rows), 5)
        self.assertEqual(rows[0], "  item13")
        self.assertEqual(rows[2].rstrip(), "> item15")


class DrawFrameTests(unittest.TestCase):
    def test_draw_frame_clears_screen_and_uses_crlf(self) -> None:
        writes: list[bytes] = []

        def capture(_fd: int, data: bytes) -> int:
            writes.append(data)
            return len(data)

        with mock.patch("lazypick.render.frame.os.write", side_effect=capture):
            draw_frame(7, ["one", "\033[1mtwo"])

        self.assertEqual(b"".join(writes), b"\033[2J\033[Hone\r\n\033[1mtwo\033[0m")


class NonInteractivePreviewTests(unittest.TestCase):
    def test_preview_lists_first_five_items(self) -> None:
        config = _config([f"b{i}" for i in range(7)], header="Pick one")

        lines = build_non_interactive_preview(config)

        self.assertEqual(lines[0], "Search: (non-interactive mode)")
        self.assertEqual(lines[2:5], ["", "Pick one", ""])
        self.assertEqual(lines[5:], ["> b0", "  b1", "  b2", "  b3", "  b4", "  ... and more"])

    def test_preview_without_overflow_marker(self) -> None:
        lines = build_non_interactive_preview(_config(["only"]))
        self.assertEqual(lines[-1], "> only")


if __name__ == "__main__":
    unittest.main()
