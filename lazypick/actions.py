"""Picker actions: the item/global union, resolution, and execution.

Handlers may return ``bool``, ``None`` or an awaitable of either. Every shape
is normalized to ``bool`` by ``Action.invoke``: only an explicit ``False``
counts as a decline.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from typing import Any, ClassVar, Generic, TypeVar, Union

from .errors import SilentExit

T = TypeVar("T")

logger = logging.getLogger(__name__)


async def normalize_outcome(outcome: Any) -> bool:
    """Await ``outcome`` if needed and map it to success/decline."""
    if inspect.isawaitable(outcome):
        outcome = await outcome
    return outcome is not False


@dataclass(frozen=True)
class ItemAction(Generic[T]):
    """Action bound to the selected list entry."""

    key: str
    label: str
    handler: Callable[[T], Any]
    description: str | None = None

    requires_item: ClassVar[bool] = True

    async def invoke(self, item: T | None) -> bool:
        if item is None:
            return False
        return await normalize_outcome(self.handler(item))


@dataclass(frozen=True)
class GlobalAction:
    """Action that runs without a selected entry."""

    key: str
    label: str
    handler: Callable[[], Any]
    description: str | None = None

    requires_item: ClassVar[bool] = False

    async def invoke(self, item: object = None) -> bool:
        return await normalize_outcome(self.handler())


Action = Union[ItemAction[T], GlobalAction]
ActionProvider = Union[Sequence[Action], Callable[[Any], Sequence[Action]]]


def resolve_actions(provider: ActionProvider | None, current_item: T | None) -> list[Action]:
    """Return the actions offered for ``current_item``.

    Static sequences are returned as-is; callables are invoked on every call so
    actions can depend on the selected entry.
    """
    if provider is None:
        return []
    if callable(provider):
        return list(provider(current_item))
    return list(provider)


def action_index_by_key(actions: Sequence[Action], key: str | None) -> int:
    """Return the index of the action with ``key``, or 0 when absent."""
    if key is None:
        return 0
    for idx, action in enumerate(actions):
        if action.key == key:
            return idx
    return 0


@dataclass(frozen=True)
class ActionResult(Generic[T]):
    """Rich handler result for actions built with ``item_action``."""

    success: bool
    follow_up: ItemAction[T] | None = None
    message: str | None = None


async def _settle_helper_result(result: Any, item: Any, exit_after_execution: bool) -> bool:
    if inspect.isawaitable(result):
        result = await result
    if isinstance(result, ActionResult):
        if result.message:
            logger.info("%s", result.message)
        if result.follow_up is not None:
            return await result.follow_up.invoke(item)
        success = result.success
    else:
        success = result is not False
    if success and exit_after_execution:
        raise SilentExit()
    return success


def item_action(
    key: str,
    label: str,
    handler: Callable[[T], bool | None | ActionResult[T] | Awaitable[Any]],
    description: str | None = None,
    *,
    exit_after_execution: bool = False,
) -> ItemAction[T]:
    """Build an ``ItemAction`` whose handler may return an ``ActionResult``.

    A follow-up action in the result runs immediately on the same item and its
    outcome becomes the action outcome. With ``exit_after_execution`` a
    successful run raises ``SilentExit``.
    """

    async def run(item: T) -> bool:
        return await _settle_helper_result(handler(item), item, exit_after_execution)

    return ItemAction(key=key, label=label, handler=run, description=description)


def global_action(
    key: str,
    label: str,
    handler: Callable[[], bool | None | ActionResult[Any] | Awaitable[Any]],
    description: str | None = None,
    *,
    exit_after_execution: bool = False,
) -> GlobalAction:
    """Build a ``GlobalAction`` with the same result handling as ``item_action``."""

    async def run() -> bool:
        return await _settle_helper_result(handler(), None, exit_after_execution)

    return GlobalAction(key=key, label=label, handler=run, description=description)
