"""Fatal error type raised by the terminal core."""

from __future__ import annotations

import os
from typing import Optional


class FatalError(Exception):
    """
    An unrecoverable failure of an OS-level operation.

    Carries the failing operation name (``tcgetattr``, ``read``, ...) and
    the OS error description, in the same shape ``perror`` prints them.
    Components raise this; only :func:`cedit.cli.core.terminal.die`
    turns it into process termination.
    """

    def __init__(
        self,
        operation: str,
        errno: Optional[int] = None,
        description: Optional[str] = None,
    ) -> None:
        if description is None:
            description = os.strerror(errno) if errno else "unknown error"
        self.operation = operation
        self.errno = errno
        self.description = description
        super().__init__(f"{operation}: {description}")

    @classmethod
    def from_os_error(cls, operation: str, error: BaseException) -> "FatalError":
        """Build from an ``OSError`` or ``termios.error``."""
        errno = getattr(error, "errno", None)
        description = getattr(error, "strerror", None)
        if errno is None and len(error.args) == 2 and isinstance(error.args[0], int):
            # termios.error carries (errno, strerror) in args
            errno, description = error.args
        return cls(operation, errno, description or str(error) or None)

    @property
    def exit_code(self) -> int:
        """Negated OS error code, or -1 when there is none."""
        return -self.errno if self.errno else -1
