"""Public runtime orchestration entry points.

This package groups the picker session bootstrap (`run_selection`, `pick`)
with the session state and terminal lifecycle it relies on.
"""

from __future__ import annotations


def run_selection(*args, **kwargs):
    """Lazily import the session entrypoint to avoid package-import cycles."""
    from .controller import run_selection as _run_selection

    return _run_selection(*args, **kwargs)


def pick(*args, **kwargs):
    """Lazily import the blocking picker wrapper."""
    from .controller import pick as _pick

    return _pick(*args, **kwargs)


__all__ = [
    "pick",
    "run_selection",
]
