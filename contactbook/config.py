"""
ContactBook - Centralized configuration.

Loads settings from .env and validates them into the `settings` singleton.
Fixed format and working-hour constants live beside it.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

# Load .env from project root (one level up from contactbook/config.py)
_ENV_PATH = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_ENV_PATH)

# Fixed serialization of appointment date-times: yyyy-MM-dd HHmm
DATETIME_FORMAT = "%Y-%m-%d %H%M"

# Bookable hours on weekdays: [start, end). Not configurable, the
# invalid-time message quotes these bounds.
WORKDAY_START_HOUR = 9
WORKDAY_END_HOUR = 17


class Settings(BaseModel):
    """Application settings loaded from environment variables."""

    # Logging
    LOG_LEVEL: str = "INFO"

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def parse_log_level(cls, v: str) -> str:
        level = str(v).strip().upper() or "INFO"
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v!r}")
        return level


def _load_settings() -> Settings:
    """Load settings from environment."""
    return Settings(
        LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO"),
    )


# Singleton: imported by all other modules as:
#   from contactbook.config import settings
settings = _load_settings()
