"""Core data structures shared by the viewer."""

from cedit.core.row import TextRow
from cedit.core.errors import FatalError

__all__ = ["TextRow", "FatalError"]
