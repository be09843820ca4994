"""Pytest fixtures: pipes and pseudo-terminals standing in for a real terminal."""

import fcntl
import os
import select
import struct
import termios
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

import pytest

from cedit.cli.core.terminal import Terminal


@dataclass
class PipeTerminal:
    """A Terminal wired to two pipes so tests can type and read the screen."""
    terminal: Terminal
    keyboard_fd: int
    screen_fd: int

    def type(self, data: bytes) -> None:
        os.write(self.keyboard_fd, data)

    def screen(self) -> bytes:
        """Everything written to the terminal so far."""
        chunks: list[bytes] = []
        while select.select([self.screen_fd], [], [], 0)[0]:
            chunk = os.read(self.screen_fd, 65536)
            if not chunk:
                break
            chunks.append(chunk)
        return b"".join(chunks)


@pytest.fixture
def pipe_terminal() -> Iterator[PipeTerminal]:
    """Terminal whose input and output are pipes (no tty, no window size)."""
    in_read, in_write = os.pipe()
    out_read, out_write = os.pipe()
    try:
        yield PipeTerminal(Terminal(in_read, out_write), in_write, out_read)
    finally:
        for fd in (in_read, in_write, out_read, out_write):
            os.close(fd)


def set_window_size(fd: int, rows: int, cols: int) -> None:
    fcntl.ioctl(fd, termios.TIOCSWINSZ, struct.pack("HHHH", rows, cols, 0, 0))


@dataclass
class Pty:
    master: int
    slave: int

    def read_until(self, marker: bytes, timeout: float = 5.0) -> bytes:
        """Read terminal output from the master side until ``marker`` shows up."""
        data = b""
        deadline = time.monotonic() + timeout
        while marker not in data:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                raise TimeoutError(f"{marker!r} not seen in {data!r}")
            if select.select([self.master], [], [], remaining)[0]:
                data += os.read(self.master, 65536)
        return data


@pytest.fixture
def pty() -> Iterator[Pty]:
    """A pseudo-terminal pair with a 24x80 window."""
    master, slave = os.openpty()
    set_window_size(slave, 24, 80)
    try:
        yield Pty(master, slave)
    finally:
        os.close(slave)
        os.close(master)


@pytest.fixture
def three_line_file(tmp_path: Path) -> Path:
    path = tmp_path / "three.txt"
    path.write_bytes(b"alpha\r\nbeta\ngamma\n")
    return path
