"""User-configurable application settings."""

from __future__ import annotations

import logging
from dataclasses import dataclass

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Logging (records go to stderr, never into the game transcript)
    log_level: str = "WARNING"

    # Players; a missing name is asked for at start-up
    white_name: str | None = None
    black_name: str | None = None

    # Console
    show_banner: bool = True

    def __post_init__(self) -> None:
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.log_level!r}")

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)
