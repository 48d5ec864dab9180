"""Pytest configuration and fixtures."""

from typing import Optional
from unittest.mock import AsyncMock

import pytest

from media_finder.config import ConfigManager
from media_finder.core.models import MediaItem, MediaKind, MediaPage
from media_finder.infrastructure import Container


@pytest.fixture
def temp_config_file(tmp_path):
    """Create a temporary configuration file."""
    config_content = """
llm:
  provider: "openai"
  model: "gpt-4o-mini"
  api_key: "test-llm-key"

tmdb:
  api_key: "test-tmdb-key"

search:
  max_candidates: 8
"""
    config_file = tmp_path / "config.yaml"
    config_file.write_text(config_content)
    return config_file


@pytest.fixture
def unconfigured_config_file(tmp_path):
    """Create a configuration file without API keys."""
    config_file = tmp_path / "empty_keys.yaml"
    config_file.write_text('llm:\n  provider: "openai"\n  api_key: ""\ntmdb:\n  api_key: ""\n')
    return config_file


@pytest.fixture
def config_manager(temp_config_file):
    """Create a configuration manager with test config."""
    return ConfigManager(temp_config_file, load_env_file=False)


@pytest.fixture
def config(config_manager):
    """Load test configuration."""
    return config_manager.load_config()


@pytest.fixture
def container(config_manager):
    """Create a test container."""
    return Container(config_manager)


def make_item(
    media_id: int,
    title: str,
    kind: MediaKind = MediaKind.MOVIE,
    rating: float = 7.5,
    release_date: Optional[str] = "2010-07-16",
    overview: str = "",
) -> MediaItem:
    """Build a MediaItem for tests."""
    return MediaItem(
        id=media_id,
        title=title,
        kind=kind,
        rating=rating,
        release_date=release_date,
        overview=overview or f"Overview of {title}",
    )


def make_page(*items: MediaItem) -> MediaPage:
    """Build a single-page MediaPage for tests."""
    return MediaPage(page=1, results=list(items), total_pages=1, total_results=len(items))


@pytest.fixture
def mock_completion_service():
    """Mock completion service."""
    service = AsyncMock()
    service.is_configured = lambda: True
    return service


@pytest.fixture
def mock_metadata_service():
    """Mock metadata service."""
    service = AsyncMock()
    service.is_configured = lambda: True
    return service


@pytest.fixture
def item_factory():
    """Factory for MediaItem test data."""
    return make_item


@pytest.fixture
def page_factory():
    """Factory for MediaPage test data."""
    return make_page
