"""Application settings, read once from the environment."""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(frozen=True)
class Settings:
    area_id: str = "tictactoe-area"
    log_level: str = "INFO"
    log_file: Optional[str] = None
    log_format: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def load_settings() -> Settings:
    """Build Settings from TICTACTOE_* environment variables (falls back to the defaults)."""
    defaults = Settings()
    log_level = os.environ.get("TICTACTOE_LOG_LEVEL", defaults.log_level).upper()
    if log_level not in LOG_LEVELS:
        logger.warning(
            "Unknown TICTACTOE_LOG_LEVEL %r, using %s. Pick one from %s",
            log_level,
            defaults.log_level,
            ",".join(LOG_LEVELS),
        )
        log_level = defaults.log_level
    return Settings(
        area_id=os.environ.get("TICTACTOE_AREA_ID", defaults.area_id),
        log_level=log_level,
        log_file=os.environ.get("TICTACTOE_LOG_FILE") or None,
    )


@lru_cache
def get_settings() -> Settings:
    return load_settings()
