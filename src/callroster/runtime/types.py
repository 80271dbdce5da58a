"""Runtime configuration types."""

from __future__ import annotations

import logging
from dataclasses import dataclass

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class CallConfig:
    """Configuration for a call participant list."""

    room_token: str = ""  # Only used as logging context
    log_level: str = "INFO"

    @property
    def level(self) -> int:
        """Numeric logging level for log_level."""
        return logging.getLevelName(self.log_level.upper())
