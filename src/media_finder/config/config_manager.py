"""Configuration management."""

import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from dotenv import load_dotenv
from pydantic import ValidationError

from .models import Config

DEFAULT_CONFIG: Dict[str, Any] = {
    "llm": {
        "provider": "openai",
        "model": "gpt-4o-mini",
        "api_key": "${LLM_API_KEY}",
    },
    "tmdb": {
        "api_key": "${TMDB_API_KEY}",
        "language": "en-US",
    },
    "search": {
        "max_candidates": 8,
    },
    "logging": {
        "level": "INFO",
    },
}

_PROVIDER_KEY_VARS = {
    "openai": "OPENAI_API_KEY",
    "anthropic": "ANTHROPIC_API_KEY",
}


class ConfigManager:
    """Manages application configuration loading and validation."""

    def __init__(self, config_path: Optional[Path] = None, load_env_file: bool = True):
        """Initialize config manager.

        Args:
            config_path: Path to configuration file. If None, searches standard locations
                and falls back to environment variables.
            load_env_file: Whether to load a ``.env`` file into the environment first.
        """
        self._config_path = config_path
        self._config: Optional[Config] = None
        if load_env_file:
            load_dotenv()

    def load_config(self) -> Config:
        """Load and validate configuration.

        Returns:
            Validated configuration object.

        Raises:
            FileNotFoundError: If an explicit configuration file is not found.
            ValueError: If configuration is invalid.
            yaml.YAMLError: If YAML parsing fails.
        """
        if self._config is not None:
            return self._config

        config_path = self._find_config_file()
        if config_path is None:
            raw_config = self._config_from_environment()
        else:
            raw_config = self._load_yaml_file(config_path)

        try:
            self._config = Config(**raw_config)
        except ValidationError as e:
            raise ValueError(f"Configuration validation failed: {e}")

        return self._config

    def reload_config(self) -> Config:
        """Reload configuration from its source.

        Returns:
            Newly loaded configuration object.
        """
        self._config = None
        return self.load_config()

    def get_config(self) -> Config:
        """Get current configuration, loading if necessary.

        Returns:
            Current configuration object.
        """
        if self._config is None:
            return self.load_config()
        return self._config

    def _search_paths(self) -> List[Path]:
        search_paths = [
            Path.cwd() / "config" / "config.yaml",
            Path.cwd() / "config.yaml",
            Path.home() / ".config" / "media_finder" / "config.yaml",
        ]

        env_config = os.getenv("MEDIA_FINDER_CONFIG")
        if env_config:
            search_paths.insert(0, Path(env_config))

        return search_paths

    def _find_config_file(self) -> Optional[Path]:
        """Find configuration file in standard locations.

        Returns:
            Path to configuration file, or None to configure from the environment.

        Raises:
            FileNotFoundError: If an explicitly given file does not exist.
        """
        if self._config_path is not None:
            if self._config_path.exists():
                return self._config_path
            raise FileNotFoundError(f"Configuration file not found: {self._config_path}")

        for path in self._search_paths():
            if path.exists():
                return path

        return None

    def _config_from_environment(self) -> Dict[str, Any]:
        """Build raw configuration from environment variables.

        Missing keys are left empty; the clients report them when used.
        """
        provider = os.getenv("LLM_PROVIDER", "openai").lower()
        llm_key = os.getenv("LLM_API_KEY") or os.getenv(_PROVIDER_KEY_VARS.get(provider, ""), "")

        llm: Dict[str, Any] = {"provider": provider, "api_key": llm_key}
        if os.getenv("LLM_MODEL"):
            llm["model"] = os.getenv("LLM_MODEL")

        return {
            "llm": llm,
            "tmdb": {"api_key": os.getenv("TMDB_API_KEY", "")},
            "logging": {"level": os.getenv("MEDIA_FINDER_LOG_LEVEL", "INFO")},
        }

    def _load_yaml_file(self, path: Path) -> Dict[str, Any]:
        """Load YAML file with environment variable expansion.

        Args:
            path: Path to YAML file.

        Returns:
            Parsed YAML data with environment variables expanded.

        Raises:
            yaml.YAMLError: If YAML parsing fails.
        """
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()

        content = os.path.expandvars(content)

        try:
            result = yaml.safe_load(content)
            if not isinstance(result, dict):
                raise yaml.YAMLError(f"YAML file {path} must contain a dictionary at root level")
            return result
        except yaml.YAMLError as e:
            raise yaml.YAMLError(f"Failed to parse YAML file {path}: {e}")

    @classmethod
    def create_default_config(cls, output_path: Path) -> None:
        """Create a default configuration file.

        Args:
            output_path: Path where to create the configuration file.
        """
        with open(output_path, "w", encoding="utf-8") as f:
            yaml.dump(DEFAULT_CONFIG, f, default_flow_style=False, indent=2, sort_keys=False)

    def validate_config_file(self, config_path: Path) -> bool:
        """Validate a configuration file without loading it as current config.

        Args:
            config_path: Path to configuration file to validate.

        Returns:
            True if configuration is valid, False otherwise.
        """
        try:
            raw_config = self._load_yaml_file(config_path)
            Config(**raw_config)
            return True
        except (ValidationError, yaml.YAMLError, FileNotFoundError):
            return False
