"""Configuration helpers and Settings container.

This module provides a small `Settings` dataclass and `get_settings` which
reads environment variables (including a check that
`POD_DEFAULT_WEEK_START_DAY` is a valid weekday).
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import logging
import os

from dotenv import load_dotenv

# Explicitly load .env from project root
PROJECT_ROOT = Path(__file__).resolve().parents[2]
load_dotenv(PROJECT_ROOT / ".env")

@dataclass(frozen=True)
class Settings:
    """Container for configuration read from the environment.

    Attributes:
        default_week_start_day: Week-start day (0 = Sunday) used when no pod
            setting is available.
        log_path: File the CLI writes its log to.
        log_level: Numeric logging level.
    """
    default_week_start_day: int
    log_path: Path
    log_level: int



def get_settings() -> Settings:
    """Read environment variables and return a frozen `Settings` object.

    Raises:
        RuntimeError: if `POD_DEFAULT_WEEK_START_DAY` is not an integer
            between 0 and 6, or `POD_PROGRESS_LOG_LEVEL` is unknown.
    """
    raw_day = os.getenv("POD_DEFAULT_WEEK_START_DAY", "1").strip()
    log_path = Path(os.getenv("POD_PROGRESS_LOG_PATH", "logs/pod_progress.log"))
    level_name = os.getenv("POD_PROGRESS_LOG_LEVEL", "INFO").strip().upper()

    try:
        week_start_day = int(raw_day)
    except ValueError:
        week_start_day = -1

    if not 0 <= week_start_day <= 6:
        raise RuntimeError(
            "POD_DEFAULT_WEEK_START_DAY must be an integer from 0 (Sunday) "
            f"to 6 (Saturday), got {raw_day!r}."
        )

    log_level = logging.getLevelName(level_name)
    if not isinstance(log_level, int):
        raise RuntimeError(f"Unknown POD_PROGRESS_LOG_LEVEL {level_name!r}.")

    return Settings(
        default_week_start_day=week_start_day,
        log_path=log_path,
        log_level=log_level,
    )
