"""Cursor movement policy, clamped to the viewport."""

from __future__ import annotations

from dataclasses import dataclass, replace

from cedit.cli.core.input import Key, KeyEvent
from cedit.cli.core.terminal import ViewportGeometry


@dataclass(frozen=True)
class CursorPosition:
    """0-indexed cursor column (x) and screen row (y)."""
    x: int = 0
    y: int = 0


MOVEMENT_KEYS = frozenset({
    Key.ARROW_UP,
    Key.ARROW_DOWN,
    Key.ARROW_LEFT,
    Key.ARROW_RIGHT,
    Key.PAGE_UP,
    Key.PAGE_DOWN,
    Key.HOME,
    Key.END,
})


def move_cursor(
    event: KeyEvent | Key,
    cursor: CursorPosition,
    geometry: ViewportGeometry,
) -> CursorPosition:
    """
    Return the cursor position after pressing a key.

    Only the coordinate changes; row content is never looked at, so the
    cursor can sit past the end of a short line. Page Up/Down step one
    line at a time ``rows - 1`` times, which moves the cursor to the top
    or bottom of the screen since there is nothing to scroll.

    Keys that do not move the cursor return it unchanged.
    """
    key = event.key if isinstance(event, KeyEvent) else event

    if key is Key.ARROW_LEFT:
        if cursor.x > 0:
            return replace(cursor, x=cursor.x - 1)
    elif key is Key.ARROW_RIGHT:
        if cursor.x < geometry.cols - 1:
            return replace(cursor, x=cursor.x + 1)
    elif key is Key.ARROW_UP:
        if cursor.y > 0:
            return replace(cursor, y=cursor.y - 1)
    elif key is Key.ARROW_DOWN:
        if cursor.y < geometry.rows - 1:
            return replace(cursor, y=cursor.y + 1)
    elif key is Key.HOME:
        return replace(cursor, x=0)
    elif key is Key.END:
        return replace(cursor, x=geometry.cols - 1)
    elif key in (Key.PAGE_UP, Key.PAGE_DOWN):
        step = Key.ARROW_UP if key is Key.PAGE_UP else Key.ARROW_DOWN
        for _ in range(geometry.rows - 1):
            cursor = move_cursor(step, cursor, geometry)
    return cursor
