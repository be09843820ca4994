"""
cedit: minimal full-screen terminal text viewer

Loads a file's lines into memory and lets you move a cursor over them
with the arrow, page, home and end keys until you press Ctrl+Q.

Quick Start:
    >>> import cedit
    >>> rows = cedit.load("notes.txt")
    >>> frame = cedit.FrameRenderer().render(rows, cedit.CursorPosition(), geometry)

Features:
    - Raw-mode terminal session that is always restored on exit
    - Escape-sequence decoder with a timeout to tell a lone Escape apart
    - One coalesced frame buffer written per refresh
"""

import logging

__version__ = "0.0.1"

logging.getLogger(__name__).addHandler(logging.NullHandler())

from cedit.core.row import TextRow
from cedit.core.errors import FatalError
from cedit.io.reader import load, load_bytes
from cedit.render.frame import FrameRenderer
from cedit.cli.core.navigation import CursorPosition, move_cursor
from cedit.cli.core.terminal import ViewportGeometry

__all__ = [
    # Version
    "__version__",
    # Core types
    "TextRow",
    "FatalError",
    "CursorPosition",
    "ViewportGeometry",
    # I/O
    "load",
    "load_bytes",
    # Rendering
    "FrameRenderer",
    "move_cursor",
]
