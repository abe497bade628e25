"""
Loguru setup driven by LoggingSettings.
"""
import os
import sys
from typing import Optional
from loguru import logger

from .config import LoggingSettings

LOG_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"


def setup_logging(settings: Optional[LoggingSettings] = None) -> None:
    """
    Replace loguru's default handler with the configured sinks.

    Args:
        settings: Logging section of the loaded settings; defaults apply when None
    """
    settings = settings or LoggingSettings()
    logger.remove()

    console_level = "DEBUG" if settings.debug_mode else "INFO"
    logger.add(sys.stderr, level=console_level, format=LOG_FORMAT)

    if settings.log_dir:
        os.makedirs(settings.log_dir, exist_ok=True)
        logger.add(
            os.path.join(settings.log_dir, "selection_{time}.log"),
            rotation="10 MB",
            retention="1 week",
            level="DEBUG",
        )

    logger.info(f"Logging initialized (console={console_level}, file={'on' if settings.log_dir else 'off'})")
