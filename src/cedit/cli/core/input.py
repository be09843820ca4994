"""Keyboard input decoding with event abstraction."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from cedit.cli.core.terminal import Terminal
from cedit.core.constants import CTRL_Q, ESC

logger = logging.getLogger(__name__)


class Key(Enum):
    """Named key constants."""
    ARROW_UP = auto()
    ARROW_DOWN = auto()
    ARROW_LEFT = auto()
    ARROW_RIGHT = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()
    HOME = auto()
    END = auto()
    DELETE = auto()
    ESCAPE = auto()
    QUIT = auto()


@dataclass(frozen=True)
class KeyEvent:
    """A decoded key press: either a named key or a literal byte."""
    key: Optional[Key] = None  # Named key if recognized
    code: Optional[int] = None  # Byte value for literal input
    raw: bytes = b""  # Bytes consumed to produce this event

    @property
    def is_char(self) -> bool:
        """Check if this is a literal byte rather than a named key."""
        return self.code is not None and self.key is None


class KeyDecoder:
    """
    Turns the raw input byte stream into one KeyEvent per call.

    Terminals send special keys as escape sequences with no length
    prefix, so a lone Escape can only be told apart from the start of a
    sequence by waiting: every byte after ESC is read with ``timeout``,
    and if it does not arrive the press is reported as ``Key.ESCAPE``.
    """

    # ESC [ <digit> ~
    TILDE_SEQUENCES: dict[int, Key] = {
        ord('1'): Key.HOME,
        ord('3'): Key.DELETE,
        ord('4'): Key.END,
        ord('5'): Key.PAGE_UP,
        ord('6'): Key.PAGE_DOWN,
        ord('7'): Key.HOME,
        ord('8'): Key.END,
    }

    # ESC [ <letter>
    CSI_SEQUENCES: dict[int, Key] = {
        ord('A'): Key.ARROW_UP,
        ord('B'): Key.ARROW_DOWN,
        ord('C'): Key.ARROW_RIGHT,
        ord('D'): Key.ARROW_LEFT,
        ord('H'): Key.HOME,
        ord('F'): Key.END,
    }

    # ESC O <letter>
    SS3_SEQUENCES: dict[int, Key] = {
        ord('H'): Key.HOME,
        ord('F'): Key.END,
    }

    def __init__(self, terminal: Terminal, timeout: float = 0.1) -> None:
        self.terminal = terminal
        self.timeout = timeout

    def read_key(self) -> KeyEvent:
        """Block until one key press is decoded."""
        first = self._wait_for_byte()

        if first == CTRL_Q:
            return KeyEvent(key=Key.QUIT, raw=bytes([first]))
        if first != ESC:
            return KeyEvent(code=first, raw=bytes([first]))

        return self._read_escape_sequence()

    def _wait_for_byte(self) -> int:
        while True:
            byte = self.terminal.read_byte(self.timeout)
            if byte is not None:
                return byte

    def _read_escape_sequence(self) -> KeyEvent:
        """Decode what follows an ESC byte that has already been read."""
        seq = bytearray([ESC])

        for _ in range(2):
            byte = self.terminal.read_byte(self.timeout)
            if byte is None:
                # Timed out: the user pressed Escape on its own
                return KeyEvent(key=Key.ESCAPE, raw=bytes(seq))
            seq.append(byte)

        intro, selector = seq[1], seq[2]
        key: Optional[Key] = None

        if intro == ord('['):
            if ord('1') <= selector <= ord('9'):
                byte = self.terminal.read_byte(self.timeout)
                if byte is None:
                    return KeyEvent(key=Key.ESCAPE, raw=bytes(seq))
                seq.append(byte)
                if byte == ord('~'):
                    key = self.TILDE_SEQUENCES.get(selector)
            else:
                key = self.CSI_SEQUENCES.get(selector)
        elif intro == ord('O'):
            key = self.SS3_SEQUENCES.get(selector)

        if key is None:
            logger.debug("unrecognized escape sequence %r", bytes(seq))
            return KeyEvent(key=Key.ESCAPE, raw=bytes(seq))
        return KeyEvent(key=key, raw=bytes(seq))
