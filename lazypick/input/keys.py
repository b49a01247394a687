"""Key token to picker event mapping.

``process_key`` is pure: it turns decoded tokens from ``reader.read_key`` into
the small event vocabulary the selection session understands.
"""

from __future__ import annotations

from dataclasses import dataclass

CANCEL = "cancel"
ESCAPE = "escape"
ENTER = "enter"
UP = "up"
DOWN = "down"
LEFT = "left"
RIGHT = "right"
BACKSPACE = "backspace"
CHARACTER = "character"

_TOKEN_EVENTS: dict[str, str] = {
    "CTRL_C": CANCEL,
    "ESC": ESCAPE,
    "ENTER": ENTER,
    "UP": UP,
    "DOWN": DOWN,
    "LEFT": LEFT,
    "RIGHT": RIGHT,
    "BACKSPACE": BACKSPACE,
}


@dataclass(frozen=True)
class KeyEvent:
    kind: str
    character: str = ""


def is_search_character(token: str) -> bool:
    """Return whether ``token`` is a single printable ASCII character."""
    return len(token) == 1 and " " <= token <= "~"


def process_key(token: str) -> KeyEvent | None:
    """Map a key token to a ``KeyEvent``; unhandled tokens map to ``None``."""
    kind = _TOKEN_EVENTS.get(token)
    if kind is not None:
        return KeyEvent(kind)
    if is_search_character(token):
        return KeyEvent(CHARACTER, token)
    return None


def clamp_move(index: int, delta: int, total: int) -> int:
    """Move ``index`` by ``delta`` inside ``[0, total - 1]`` without wrapping.

    Returns ``-1`` for an empty sequence.
    """
    if total <= 0:
        return -1
    return max(0, min(total - 1, index + delta))
