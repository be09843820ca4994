"""Low-level terminal operations: raw mode, window size, screen output."""

from __future__ import annotations

import atexit
import errno
import logging
import os
import re
import select
import sys
import termios
import tty
from dataclasses import dataclass
from typing import NoReturn, Optional

from rich.console import Console
from rich.markup import escape

from cedit.core.constants import (
    CLEAR_SCREEN,
    CURSOR_TO_BOTTOM_RIGHT,
    QUERY_CURSOR_POSITION,
)
from cedit.core.errors import FatalError

logger = logging.getLogger(__name__)

# Longest cursor position report we accept, e.g. ESC[9999;9999R
STATUS_REPORT_MAX = 32

_STATUS_REPORT = re.compile(rb"\x1b\[(\d+);(\d+)")


@dataclass(frozen=True)
class ViewportGeometry:
    """Visible terminal extent in rows and columns."""
    rows: int
    cols: int

    @property
    def is_valid(self) -> bool:
        return self.rows > 0 and self.cols > 0


class Terminal:
    """
    Terminal I/O bound to a pair of file descriptors.

    Output goes straight to ``os.write`` so a frame leaves in one call,
    bypassing Python's buffered ``sys.stdout``.
    """

    def __init__(self, in_fd: Optional[int] = None, out_fd: Optional[int] = None) -> None:
        self.in_fd = sys.stdin.fileno() if in_fd is None else in_fd
        self.out_fd = sys.stdout.fileno() if out_fd is None else out_fd

    def write(self, data: bytes) -> int:
        """Write bytes in a single call. Short writes are not retried."""
        try:
            return os.write(self.out_fd, data)
        except OSError as e:
            raise FatalError.from_os_error("write", e) from e

    def clear(self) -> None:
        """Clear screen and move cursor to home."""
        self.write(CLEAR_SCREEN)

    def wait_readable(self, timeout: float) -> bool:
        """Check if input is available within timeout."""
        try:
            ready, _, _ = select.select([self.in_fd], [], [], timeout)
        except (ValueError, OSError) as e:
            raise FatalError.from_os_error("select", e) from e
        return bool(ready)

    def read_byte(self, timeout: float) -> Optional[int]:
        """
        Read one byte, waiting at most ``timeout`` seconds.

        Returns None if nothing arrived in time. A descriptor that is
        readable but yields no bytes has hit end of input, and no key
        can ever arrive again: that raises FatalError.
        """
        if not self.wait_readable(timeout):
            return None
        try:
            data = os.read(self.in_fd, 1)
        except BlockingIOError:
            return None
        except OSError as e:
            raise FatalError.from_os_error("read", e) from e
        if not data:
            raise FatalError("read", errno.EIO, "end of input")
        return data[0]

    def size(self, timeout: float = 0.1) -> ViewportGeometry:
        """Get current terminal dimensions, see :func:`probe_geometry`."""
        return probe_geometry(self, timeout)


class SessionGuard:
    """
    Raw-mode lifecycle for one terminal descriptor.

    ``enter()`` snapshots the current attributes and switches to raw
    mode with a bounded read (VMIN=0, VTIME=1). An ``atexit`` hook
    calling ``restore()`` is registered on the first ``enter()``, so
    the snapshot is reapplied on every exit path. Also usable as a
    context manager.
    """

    def __init__(self, fd: Optional[int] = None) -> None:
        self.fd = sys.stdin.fileno() if fd is None else fd
        self._saved: Optional[list] = None
        self._hooked = False

    @property
    def active(self) -> bool:
        return self._saved is not None

    @property
    def saved(self) -> Optional[list]:
        """Attributes captured by the last ``enter()``."""
        return self._saved

    def enter(self) -> None:
        try:
            saved = termios.tcgetattr(self.fd)
        except termios.error as e:
            raise FatalError.from_os_error("tcgetattr", e) from e
        self._saved = saved

        if not self._hooked:
            atexit.register(self._restore_at_exit)
            self._hooked = True

        try:
            termios.tcsetattr(self.fd, termios.TCSAFLUSH, raw_attributes(saved))
        except termios.error as e:
            raise FatalError.from_os_error("tcsetattr", e) from e
        logger.debug("raw mode on fd %d", self.fd)

    def restore(self) -> None:
        """Reapply the captured attributes. No-op when not in raw mode."""
        if self._saved is None:
            return
        try:
            termios.tcsetattr(self.fd, termios.TCSAFLUSH, self._saved)
        except termios.error as e:
            raise FatalError.from_os_error("tcsetattr", e) from e
        self._saved = None
        logger.debug("terminal attributes restored on fd %d", self.fd)

    def _restore_at_exit(self) -> None:
        try:
            self.restore()
        except FatalError as e:
            logger.error("%s", e)
            sys.stderr.write(f"{e}\n")

    def __enter__(self) -> "SessionGuard":
        self.enter()
        return self

    def __exit__(self, _exc_type, _exc, _tb) -> None:
        self.restore()


def raw_attributes(attrs: list) -> list:
    """Return a raw-mode copy of a ``tcgetattr`` attribute list."""
    raw = list(attrs)
    raw[tty.CC] = list(attrs[tty.CC])

    raw[tty.IFLAG] &= ~(termios.BRKINT | termios.ICRNL | termios.INPCK
                        | termios.ISTRIP | termios.IXON)
    raw[tty.OFLAG] &= ~termios.OPOST
    raw[tty.CFLAG] |= termios.CS8
    raw[tty.LFLAG] &= ~(termios.ECHO | termios.ICANON | termios.ISIG | termios.IEXTEN)
    # Return as soon as any input is there, or after 1/10 s without any
    raw[tty.CC][termios.VMIN] = 0
    raw[tty.CC][termios.VTIME] = 1
    return raw


def probe_geometry(terminal: Terminal, timeout: float = 0.1) -> ViewportGeometry:
    """
    Discover the terminal window size.

    Asks the OS first. When that fails or reports zero columns, pushes
    the cursor to the bottom-right corner and asks the terminal where
    it ended up. Raises FatalError if neither path yields a size.
    """
    try:
        size = os.get_terminal_size(terminal.out_fd)
    except OSError as e:
        logger.info("window size ioctl failed (%s), asking the terminal", e)
    else:
        if size.columns != 0:
            geometry = ViewportGeometry(size.lines, size.columns)
            logger.debug("window size from ioctl: %s", geometry)
            if not geometry.is_valid:
                raise FatalError("getWindowSize", errno.EINVAL)
            return geometry
        logger.info("window size ioctl reported zero columns, asking the terminal")

    terminal.write(CURSOR_TO_BOTTOM_RIGHT)
    geometry = cursor_position(terminal, timeout)
    logger.debug("window size from cursor position: %s", geometry)
    return geometry


def cursor_position(terminal: Terminal, timeout: float = 0.1) -> ViewportGeometry:
    """Query the cursor position with a device status report."""
    terminal.write(QUERY_CURSOR_POSITION)

    response = bytearray()
    while len(response) < STATUS_REPORT_MAX - 1:
        byte = terminal.read_byte(timeout)
        if byte is None or byte == ord('R'):
            break
        response.append(byte)

    match = _STATUS_REPORT.fullmatch(bytes(response))
    if match is None:
        logger.error("malformed cursor position report: %r", bytes(response))
        raise FatalError("getWindowSize", errno.EIO, "malformed cursor position report")

    geometry = ViewportGeometry(int(match.group(1)), int(match.group(2)))
    if not geometry.is_valid:
        raise FatalError("getWindowSize", errno.EINVAL)
    return geometry


_stderr = Console(stderr=True, highlight=False)


def die(error: FatalError, terminal: Optional[Terminal] = None) -> NoReturn:
    """Clear the screen, report the error and exit with its code."""
    if terminal is not None:
        try:
            terminal.clear()
        except FatalError as e:
            logger.debug("could not clear screen: %s", e)
    logger.error("fatal: %s", error)
    _stderr.print(f"[red]{escape(error.operation)}[/]: {escape(error.description)}")
    sys.exit(error.exit_code)
