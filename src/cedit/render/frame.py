"""Render the row store to one VT100 frame."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Sequence

from cedit import __version__
from cedit.core.constants import (
    CURSOR_HOME,
    EMPTY_LINE_MARKER,
    ERASE_LINE_END,
    HIDE_CURSOR,
    NEWLINE,
    SHOW_CURSOR,
    cursor_to,
)
from cedit.core.row import TextRow

if TYPE_CHECKING:
    from cedit.cli.core.navigation import CursorPosition
    from cedit.cli.core.terminal import Terminal, ViewportGeometry


def welcome_banner() -> bytes:
    return f"CEdit editor -- version {__version__}".encode("ascii")


class FrameRenderer:
    """
    Build a full screen image as a single byte string.

    Every frame is drawn from scratch: hide the cursor, home, draw each
    screen line followed by erase-to-end-of-line, then place and show
    the cursor. Nothing is diffed against the previous frame.
    """

    def __init__(self, banner: Optional[bytes] = None) -> None:
        self.banner = welcome_banner() if banner is None else banner

    def render(
        self,
        rows: Sequence[TextRow],
        cursor: "CursorPosition",
        geometry: "ViewportGeometry",
    ) -> bytes:
        """Render rows and cursor to a frame."""
        buf = bytearray()
        buf += HIDE_CURSOR
        buf += CURSOR_HOME

        self._draw_rows(buf, rows, geometry)

        buf += cursor_to(cursor.y + 1, cursor.x + 1)
        buf += SHOW_CURSOR
        return bytes(buf)

    def refresh(
        self,
        terminal: "Terminal",
        rows: Sequence[TextRow],
        cursor: "CursorPosition",
        geometry: "ViewportGeometry",
    ) -> None:
        """Render and write the frame in one call."""
        terminal.write(self.render(rows, cursor, geometry))

    def _draw_rows(
        self,
        buf: bytearray,
        rows: Sequence[TextRow],
        geometry: "ViewportGeometry",
    ) -> None:
        for y in range(geometry.rows):
            if y < len(rows):
                buf += rows[y].clipped(geometry.cols)
            elif not rows and y == geometry.rows // 3:
                buf += self._banner_line(geometry.cols)
            else:
                buf += EMPTY_LINE_MARKER

            buf += ERASE_LINE_END
            if y < geometry.rows - 1:
                buf += NEWLINE

    def _banner_line(self, cols: int) -> bytes:
        """Banner centered in ``cols``, keeping the marker in column 0."""
        banner = self.banner[:cols]
        padding = (cols - len(banner)) // 2
        if padding == 0:
            return banner
        return EMPTY_LINE_MARKER + b" " * (padding - 1) + banner
