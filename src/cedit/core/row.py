"""TextRow - one line of the loaded file."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TextRow:
    """
    A single line of text as raw bytes, without its line terminator.

    Rows are created once when a file is loaded and never modified.
    Column math is byte-based: one byte is one screen column.
    """
    content: bytes = b""

    @property
    def length(self) -> int:
        return len(self.content)

    def __len__(self) -> int:
        return len(self.content)

    def clipped(self, width: int) -> bytes:
        """Return at most ``width`` bytes from the start of the row."""
        if width <= 0:
            return b""
        return self.content[:width]
