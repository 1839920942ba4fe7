"""Loguru sink setup."""

import sys

from loguru import logger

from .config import LoggingConfig

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def setup_logging(logging_config: LoggingConfig) -> None:
    """Replace loguru's default sink with console and optional file sinks."""
    logger.remove()

    logger.add(sys.stderr, level=logging_config.level, format=CONSOLE_FORMAT)

    if logging_config.file:
        logger.add(
            logging_config.file,
            level=logging_config.level,
            format=FILE_FORMAT,
            rotation=logging_config.max_size,
            retention=logging_config.backup_count,
        )
