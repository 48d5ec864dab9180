"""Configuration data models."""

import os
import re
from typing import NamedTuple, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

_UNEXPANDED_VAR = re.compile(r"^\$\{?\w+\}?$")


def _expand_secret(value: Optional[str]) -> str:
    """Expand environment variables, treating unresolved placeholders as unset."""
    if not value:
        return ""
    expanded = os.path.expandvars(value).strip()
    if _UNEXPANDED_VAR.match(expanded):
        return ""
    return expanded


class LLMConfig(BaseModel):
    """Completion (LLM) provider configuration."""

    provider: str = Field(default="openai", description="LLM provider name")
    model: str = Field(default="gpt-4o-mini", description="Model identifier")
    api_key: str = Field(default="", description="API key for the provider")
    max_tokens: int = Field(default=1000, gt=0, description="Maximum tokens for completion")
    temperature: float = Field(default=0.7, ge=0.0, le=2.0, description="Sampling temperature")
    timeout: int = Field(default=30, gt=0, description="Request timeout in seconds")

    @field_validator("provider")
    @classmethod
    def validate_provider(cls, v: str) -> str:
        """Validate LLM provider."""
        allowed = {"openai", "anthropic"}
        if v.lower() not in allowed:
            raise ValueError(f"Provider must be one of: {allowed}")
        return v.lower()

    @field_validator("api_key", mode="before")
    @classmethod
    def validate_api_key(cls, v: Optional[str]) -> str:
        """Expand environment variables in API key."""
        return _expand_secret(v)


class TMDbConfig(BaseModel):
    """TMDb API configuration."""

    api_key: str = Field(default="", description="TMDb API key")
    base_url: str = Field(default="https://api.themoviedb.org/3", description="TMDb API base URL")
    image_base_url: str = Field(
        default="https://image.tmdb.org/t/p", description="TMDb image CDN base URL"
    )
    language: str = Field(default="en-US", description="Default language for requests")
    include_adult: bool = Field(default=False, description="Include adult titles in searches")
    timeout: int = Field(default=10, gt=0, description="Request timeout in seconds")

    @field_validator("api_key", mode="before")
    @classmethod
    def validate_api_key(cls, v: Optional[str]) -> str:
        """Expand environment variables in API key."""
        return _expand_secret(v)

    @field_validator("base_url", "image_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize URLs without a trailing slash."""
        return v.rstrip("/")


class SearchConfig(BaseModel):
    """Natural-language search configuration."""

    max_candidates: int = Field(
        default=8, gt=0, le=20, description="Titles requested from the model per query"
    )
    suggestion_count: int = Field(
        default=5, gt=0, le=20, description="Titles requested for similar-title suggestions"
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", description="Logging level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format string",
    )
    file: Optional[str] = Field(default=None, description="Log file path")
    max_size_mb: int = Field(default=10, gt=0, description="Maximum log file size in MB")
    backup_count: int = Field(default=5, ge=0, description="Number of backup log files")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate logging level."""
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"Logging level must be one of: {allowed}")
        return v.upper()


class Credentials(NamedTuple):
    """The credentials the two external clients are built from."""

    metadata_api_key: str
    completion_api_key: str
    completion_model: str


class Config(BaseModel):
    """Main configuration model."""

    llm: LLMConfig = Field(default_factory=LLMConfig, description="LLM configuration")
    tmdb: TMDbConfig = Field(default_factory=TMDbConfig, description="TMDb configuration")
    search: SearchConfig = Field(
        default_factory=SearchConfig, description="Natural-language search configuration"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )

    model_config = ConfigDict(
        validate_assignment=True,
        populate_by_name=True,
    )

    @property
    def credentials(self) -> Credentials:
        """Get the credential view passed to the external clients."""
        return Credentials(
            metadata_api_key=self.tmdb.api_key,
            completion_api_key=self.llm.api_key,
            completion_model=self.llm.model,
        )
