"""Configuration management module."""

from .config_manager import ConfigManager
from .models import Config, Credentials, LLMConfig, LoggingConfig, SearchConfig, TMDbConfig

__all__ = [
    "ConfigManager",
    "Config",
    "Credentials",
    "LLMConfig",
    "TMDbConfig",
    "SearchConfig",
    "LoggingConfig",
]
