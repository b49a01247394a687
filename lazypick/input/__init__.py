"""Input-layer public API for key decoding and event mapping.

Exports are split between low-level terminal decoding (`read_key`), the
asyncio listener that feeds decoded tokens, and the pure token-to-event map.
"""

from .keys import KeyEvent, clamp_move, is_search_character, process_key
from .listener import KeypressListener
from .reader import ESC_SEQUENCE_TIMEOUT_MS, _PENDING_BYTES, read_key

__all__ = [
    "read_key",
    "_PENDING_BYTES",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "KeyEvent",
    "KeypressListener",
    "clamp_move",
    "is_search_character",
    "process_key",
]
