"""Per-event transitions and the commit protocol for one picker session.

``SelectionSession`` is the only writer of ``SessionState``. Key handling is
synchronous and render-inclusive; only ``commit`` awaits, because it runs the
chosen action handler.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from ..actions import action_index_by_key, resolve_actions
from ..errors import SelectionCancelled
from ..input import keys
from ..input.keys import KeyEvent, clamp_move
from ..search.ranking import filter_items
from .state import SelectionConfig, SelectionResult, SessionState

T = TypeVar("T")

logger = logging.getLogger(__name__)


class SelectionSession(Generic[T]):
    """State-bound picker transitions.

    ``render`` is called after every mutation that changes what is on screen,
    with the already-updated state.
    """

    def __init__(
        self,
        config: SelectionConfig[T],
        render: Callable[[SessionState], None] | None = None,
    ) -> None:
        self.config = config
        self.items: tuple[T, ...] = tuple(config.items)
        self._render = render
        self.state = SessionState(
            filtered_items=list(self.items),
            current_index=0 if self.items else -1,
        )
        self.refresh_actions()

    def render(self) -> None:
        if self._render is not None:
            self._render(self.state)

    def current_item(self) -> T | None:
        return self.state.current_item()

    def refresh_actions(self) -> None:
        """Re-resolve actions for the selected item and re-seat the action cursor.

        The previously highlighted action stays highlighted when it is still
        offered; otherwise the configured default key wins, then index 0.
        """
        state = self.state
        previous = state.selected_action()
        actions = resolve_actions(self.config.actions, self.current_item())
        state.active_actions = actions
        if not actions:
            state.selected_action_index = 0
        elif previous is not None and any(action.key == previous.key for action in actions):
            state.selected_action_index = action_index_by_key(actions, previous.key)
        else:
            state.selected_action_index = action_index_by_key(actions, self.config.default_action_key)
        state.check_invariants()

    def refilter(self) -> None:
        """Recompute the full filtered list for the current search term."""
        state = self.state
        state.filtered_items = filter_items(self.items, state.search_term, self.config.search_text)
        state.current_index = 0 if state.filtered_items else -1
        self.refresh_actions()

    def _move_item(self, delta: int) -> None:
        state = self.state
        if not state.filtered_items:
            return
        state.current_index = clamp_move(state.current_index, delta, len(state.filtered_items))
        self.refresh_actions()
        self.render()

    def _move_action(self, delta: int) -> None:
        state = self.state
        if not state.active_actions:
            return
        state.selected_action_index = clamp_move(state.selected_action_index, delta, len(state.active_actions))
        state.check_invariants()
        self.render()

    def handle_event(self, event: KeyEvent) -> tuple[bool, SelectionResult[T] | None]:
        """Apply one key event.

        Returns ``(commit_requested, settled_result)``. Cancellation raises
        ``SelectionCancelled`` instead of returning.
        """
        state = self.state
        kind = event.kind

        if kind == keys.CANCEL:
            logger.debug("selection cancelled by user")
            raise SelectionCancelled()

        if kind == keys.ESCAPE:
            if self.config.allow_back:
                return False, SelectionResult(item=None, action=None, success=False, back=True)
            state.search_term = ""
            self.refilter()
            self.render()
            return False, None

        if kind == keys.ENTER:
            return True, None

        if kind == keys.UP:
            self._move_item(-1)
        elif kind == keys.DOWN:
            self._move_item(1)
        elif kind == keys.LEFT:
            self._move_action(-1)
        elif kind == keys.RIGHT:
            self._move_action(1)
        elif kind == keys.BACKSPACE:
            if state.search_term:
                state.search_term = state.search_term[:-1]
                self.refilter()
                self.render()
        elif kind == keys.CHARACTER:
            state.search_term += event.character
            self.refilter()
            self.render()
        return False, None

    def handle_key(self, token: str) -> tuple[bool, SelectionResult[T] | None]:
        """Decode and apply one raw key token; unmapped tokens are ignored."""
        event = keys.process_key(token)
        if event is None:
            return False, None
        return self.handle_event(event)

    async def commit(self) -> SelectionResult[T]:
        """Run the highlighted action (if any) and build the settled result.

        Handler exceptions propagate unchanged.
        """
        state = self.state
        item = self.current_item()
        chosen = state.selected_action()
        if chosen is None:
            return SelectionResult(item=item, action=None, success=item is not None)

        if chosen.requires_item and item is None:
            logger.debug("action %r needs an item but the list is empty", chosen.key)
            return SelectionResult(item=None, action=chosen, success=False)

        logger.debug("running action %r", chosen.key)
        success = await chosen.invoke(item)
        logger.debug("action %r finished with success=%s", chosen.key, success)
        return SelectionResult(item=item, action=chosen, success=success)


def first_item_result(items: tuple[Any, ...]) -> SelectionResult[Any]:
    """Result used when no interactive terminal is available."""
    return SelectionResult(item=items[0] if items else None, action=None, success=bool(items))
