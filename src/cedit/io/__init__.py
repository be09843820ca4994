"""File I/O for the row store."""

from cedit.io.reader import load, load_bytes

__all__ = ["load", "load_bytes"]
