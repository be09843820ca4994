"""Load text files into an ordered list of rows."""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Iterable

from cedit.core.errors import FatalError
from cedit.core.row import TextRow

logger = logging.getLogger(__name__)


def load(path: str | Path) -> list[TextRow]:
    """
    Load a file from disk, one TextRow per line.

    Lines are read as raw bytes; trailing newline and carriage-return
    bytes are stripped. A missing or unreadable file raises FatalError.
    """
    path = Path(path)

    try:
        with open(path, 'rb') as f:
            rows = _to_rows(f)
    except OSError as e:
        raise FatalError.from_os_error("open", e) from e

    logger.info("loaded %d rows from %s", len(rows), path)
    return rows


def load_bytes(data: bytes) -> list[TextRow]:
    """Split raw bytes into rows the same way :func:`load` does."""
    return _to_rows(io.BytesIO(data))


def _to_rows(lines: Iterable[bytes]) -> list[TextRow]:
    return [TextRow(line.rstrip(b'\r\n')) for line in lines]
