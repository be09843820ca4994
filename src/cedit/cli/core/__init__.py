"""Terminal core - raw mode, window size, key decoding, cursor movement."""

from cedit.cli.core.terminal import (
    SessionGuard,
    Terminal,
    ViewportGeometry,
    die,
    probe_geometry,
)
from cedit.cli.core.input import KeyDecoder, KeyEvent, Key
from cedit.cli.core.navigation import CursorPosition, MOVEMENT_KEYS, move_cursor

__all__ = [
    "SessionGuard",
    "Terminal",
    "ViewportGeometry",
    "die",
    "probe_geometry",
    "KeyDecoder",
    "KeyEvent",
    "Key",
    "CursorPosition",
    "MOVEMENT_KEYS",
    "move_cursor",
]
