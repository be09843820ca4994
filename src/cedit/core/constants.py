"""Shared constants: control bytes and VT100 sequences."""

# Control bytes
ESC = 0x1b
CTRL_Q = ord('q') & 0x1f

# Control sequences
CSI = b"\x1b["
CLEAR_SCREEN = CSI + b"2J" + CSI + b"1;1H"
CURSOR_HOME = CSI + b"H"
HIDE_CURSOR = CSI + b"?25l"
SHOW_CURSOR = CSI + b"?25h"
ERASE_LINE_END = CSI + b"K"
QUERY_CURSOR_POSITION = CSI + b"6n"
CURSOR_TO_BOTTOM_RIGHT = CSI + b"999C" + CSI + b"999B"
NEWLINE = b"\r\n"

# Screen line start marker for lines past the end of the file
EMPTY_LINE_MARKER = b"~"


def cursor_to(row: int, col: int) -> bytes:
    """Absolute cursor move (1-indexed)."""
    return CSI + f"{row};{col}H".encode("ascii")
