"""Public package surface for lazypick.

Exposes the picker entry points, configuration/result types, the action
union, and the cancellation signal. ``main`` is imported lazily to keep
package imports lightweight.
"""

from __future__ import annotations

from .actions import ActionResult, GlobalAction, ItemAction, global_action, item_action
from .errors import ExitCode, LazyPickError, SelectionCancelled, SilentExit
from .runtime import pick, run_selection
from .runtime.state import SelectionConfig, SelectionResult
from .search import RankedEntry, rank


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "ActionResult",
    "ExitCode",
    "GlobalAction",
    "ItemAction",
    "LazyPickError",
    "RankedEntry",
    "SelectionCancelled",
    "SelectionConfig",
    "SelectionResult",
    "SilentExit",
    "global_action",
    "item_action",
    "main",
    "pick",
    "rank",
    "run_selection",
]
