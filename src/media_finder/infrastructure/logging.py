"""Logging configuration and setup."""

import logging
import logging.handlers
from pathlib import Path

from ..config.models import LoggingConfig

# Chatty third-party loggers kept at WARNING
NOISY_LOGGERS = ("aiohttp", "asyncio", "httpx", "httpcore", "openai", "anthropic")


def setup_logging(config: LoggingConfig) -> None:
    """Set up logging configuration.

    Args:
        config: Logging configuration.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, config.level))

    root_logger.handlers.clear()

    formatter = logging.Formatter(config.format)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(getattr(logging, config.level))
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if config.file:
        log_path = Path(config.file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=config.max_size_mb * 1024 * 1024,
            backupCount=config.backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(getattr(logging, config.level))
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.info(f"Logging configured with level {config.level}")


class LoggerMixin:
    """Mixin class that provides logging functionality."""

    @property
    def logger(self) -> logging.Logger:
        """Get logger for this class."""
        return logging.getLogger(f"{self.__class__.__module__}.{self.__class__.__name__}")
