"""Picker configuration, mutable session state, and the settled result."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from ..actions import Action, ActionProvider
from ..ui_theme import DEFAULT_THEME, PickerTheme

T = TypeVar("T")

DEFAULT_VIEWPORT_ROWS = 7


@dataclass(frozen=True)
class SelectionConfig(Generic[T]):
    """Everything a caller supplies to run one picker session."""

    items: Sequence[T]
    render_item: Callable[[T], str]
    get_search_text: Callable[[T], str] | None = None
    actions: ActionProvider | None = None
    header: str | None = None
    default_action_key: str | None = None
    allow_back: bool = False
    viewport_rows: int = DEFAULT_VIEWPORT_ROWS
    theme: PickerTheme = DEFAULT_THEME

    def display_text(self, item: T) -> str:
        return self.render_item(item)

    def search_text(self, item: T) -> str:
        if self.get_search_text is None:
            return self.render_item(item)
        return self.get_search_text(item)


@dataclass(frozen=True)
class SelectionResult(Generic[T]):
    item: T | None
    action: Action | None
    success: bool
    back: bool = False


@dataclass
class SessionState:
    """Mutable picker state owned by a single ``SelectionSession``."""

    search_term: str = ""
    filtered_items: list[Any] = field(default_factory=list)
    current_index: int = -1
    selected_action_index: int = 0
    active_actions: list[Action] = field(default_factory=list)

    def current_item(self) -> Any | None:
        if self.current_index < 0:
            return None
        return self.filtered_items[self.current_index]

    def selected_action(self) -> Action | None:
        if not self.active_actions:
            return None
        return self.active_actions[self.selected_action_index]

    def check_invariants(self) -> None:
        if self.filtered_items:
            assert 0 <= self.current_index < len(self.filtered_items), (
                f"current_index {self.current_index} outside {len(self.filtered_items)} items"
            )
        else:
            assert self.current_index == -1, f"current_index {self.current_index} with no items"
        if self.active_actions:
            assert 0 <= self.selected_action_index < len(self.active_actions), (
                f"selected_action_index {self.selected_action_index} outside {len(self.active_actions)} actions"
            )
        else:
            assert self.selected_action_index == 0, "selected_action_index set without actions"
