"""Configuration management for the explorer CLI."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = "WARNING"


@dataclass
class Config:
    """Application configuration."""

    work_dir: str = ""
    log_level: str = DEFAULT_LOG_LEVEL


def _log_level(value: str) -> str:
    level = value.strip().upper()
    if level not in logging.getLevelNamesMapping():
        logger.warning("Unknown JEST_EXPLORER_LOG_LEVEL %r, using %s", value, DEFAULT_LOG_LEVEL)
        return DEFAULT_LOG_LEVEL
    return level


def get_config() -> Config:
    """Get configuration from environment variables."""
    return Config(
        work_dir=os.getenv("JEST_EXPLORER_WORK_DIR") or str(Path.cwd()),
        log_level=_log_level(os.getenv("JEST_EXPLORER_LOG_LEVEL", DEFAULT_LOG_LEVEL)),
    )
