"""Logging setup for the entrypoint. Library modules only ever call logging.getLogger(__name__)."""

import logging

from src.core.config import Settings

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Root logger gets a stream handler, plus a file handler if a log file is configured."""
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if settings.log_file:
        handlers.append(logging.FileHandler(settings.log_file, encoding="utf-8"))

    logging.basicConfig(
        level=settings.log_level,
        format=settings.log_format,
        handlers=handlers,
        force=True,
    )
    logger.debug("Logging configured (level=%s, file=%s)", settings.log_level, settings.log_file)
