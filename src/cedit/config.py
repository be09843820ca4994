"""Viewer configuration."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


@dataclass(frozen=True)
class ViewerConfig:
    """
    Settings for one viewer session.

    Built by the CLI from options and ``CEDIT_*`` environment variables.
    """
    # Seconds to wait for the rest of an escape sequence
    escape_timeout: float = 0.1
    log_file: Optional[Path] = None
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.escape_timeout <= 0:
            raise ValueError(f"escape_timeout must be positive, got {self.escape_timeout}")
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"Invalid log level: {self.log_level}")

    def configure_logging(self) -> None:
        """Send log records to ``log_file``; the terminal itself is never used."""
        if self.log_file is None:
            return
        logging.basicConfig(
            filename=str(self.log_file),
            level=self.log_level.upper(),
            format=LOG_FORMAT,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize for logging."""
        return {
            "escape_timeout": self.escape_timeout,
            "log_file": str(self.log_file) if self.log_file else None,
            "log_level": self.log_level.upper(),
        }
