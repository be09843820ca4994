"""Interactive full-screen text viewer."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from cedit.cli.core.input import Key, KeyDecoder
from cedit.cli.core.navigation import CursorPosition, MOVEMENT_KEYS, move_cursor
from cedit.cli.core.terminal import SessionGuard, Terminal, ViewportGeometry, die
from cedit.config import ViewerConfig
from cedit.core.errors import FatalError
from cedit.core.row import TextRow
from cedit.io.reader import load
from cedit.render.frame import FrameRenderer

logger = logging.getLogger(__name__)


@dataclass
class ViewerState:
    """Session state passed through the loop instead of module globals."""
    geometry: ViewportGeometry
    rows: list[TextRow] = field(default_factory=list)
    cursor: CursorPosition = field(default_factory=CursorPosition)


class ViewerApp:
    """
    Full-screen viewer loop.

    Enters raw mode, measures the window, loads the file, then repeats
    refresh-screen / read-one-key / dispatch until Ctrl+Q.
    """

    def __init__(
        self,
        path: Optional[Path] = None,
        config: Optional[ViewerConfig] = None,
        terminal: Optional[Terminal] = None,
    ) -> None:
        self.path = path
        self.config = config or ViewerConfig()
        self.terminal = terminal or Terminal()
        self.guard = SessionGuard(self.terminal.in_fd)
        self.input = KeyDecoder(self.terminal, timeout=self.config.escape_timeout)
        self.renderer = FrameRenderer()
        self.state: Optional[ViewerState] = None
        self.running = False
        logger.debug("config %s", self.config.to_dict())

    def start(self) -> ViewerState:
        """Measure the window and load rows. Raw mode must already be on."""
        geometry = self.terminal.size(self.config.escape_timeout)
        logger.debug("viewport %dx%d", geometry.cols, geometry.rows)

        rows = load(self.path) if self.path is not None else []
        self.state = ViewerState(geometry=geometry, rows=rows)
        return self.state

    def run(self) -> None:
        """
        Main application loop.

        Returns after Ctrl+Q with the screen cleared and the terminal
        restored. FatalError propagates after the terminal is restored.
        """
        with self.guard:
            state = self.start()
            self.running = True
            while self.running:
                self.refresh(state)
                self.process_keypress(state)
        logger.debug("viewer exited")

    def refresh(self, state: ViewerState) -> None:
        self.renderer.refresh(self.terminal, state.rows, state.cursor, state.geometry)

    def process_keypress(self, state: ViewerState) -> None:
        """Read one key and apply it."""
        event = self.input.read_key()

        if event.key is Key.QUIT:
            self.terminal.clear()
            self.running = False
            return

        if event.key in MOVEMENT_KEYS:
            state.cursor = move_cursor(event, state.cursor, state.geometry)


def run_viewer(
    path: Optional[Path] = None,
    config: Optional[ViewerConfig] = None,
    terminal: Optional[Terminal] = None,
) -> None:
    """Launch the viewer; a fatal error clears the screen and exits non-zero."""
    app = ViewerApp(path, config, terminal)
    try:
        app.run()
    except FatalError as e:
        die(e, app.terminal)


if __name__ == "__main__":
    path = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    run_viewer(path)
