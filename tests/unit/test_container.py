"""Test dependency injection container."""

from unittest.mock import AsyncMock

import pytest

from media_finder.config import ConfigManager
from media_finder.core.interfaces import (
    ICompletionService,
    IMediaAssistant,
    IMediaResolver,
    IMetadataService,
)
from media_finder.core.services import (
    AnthropicCompletionService,
    MediaAssistant,
    MediaResolver,
    OpenAICompletionService,
    TMDbService,
)
from media_finder.infrastructure import Container


class TestContainer:
    """Test Container."""

    def test_default_services(self, container):
        """Test that default registrations resolve with injected dependencies."""
        container.configure_default_services()

        resolver = container.get(IMediaResolver)

        assert isinstance(resolver, MediaResolver)
        assert isinstance(container.get(ICompletionService), OpenAICompletionService)
        assert isinstance(container.get(IMetadataService), TMDbService)
        assert isinstance(container.get(IMediaAssistant), MediaAssistant)
        assert resolver._metadata_service is container.get(IMetadataService)
        assert resolver._completion_service is container.get(ICompletionService)

    def test_singletons_are_cached(self, container):
        """Test that singletons resolve to the same instance."""
        container.configure_default_services()

        assert container.get(IMetadataService) is container.get(IMetadataService)

    def test_anthropic_provider(self, tmp_path):
        """Test provider selection."""
        config_file = tmp_path / "anthropic.yaml"
        config_file.write_text('llm:\n  provider: "anthropic"\n  api_key: "k"\n')
        container = Container(ConfigManager(config_file, load_env_file=False))

        container.configure_default_services()

        assert isinstance(container.get(ICompletionService), AnthropicCompletionService)

    def test_unregistered_service(self, container):
        """Test that unknown interfaces raise."""
        with pytest.raises(ValueError):
            container.get(IMediaResolver)

    def test_register_instance(self, container, mock_metadata_service):
        """Test that registered instances are injected."""
        container.configure_default_services()
        container.register_instance(IMetadataService, mock_metadata_service)

        resolver = container.get(IMediaResolver)

        assert resolver._metadata_service is mock_metadata_service

    def test_reset(self, container):
        """Test that reset clears registrations."""
        container.configure_default_services()
        container.reset()

        with pytest.raises(ValueError):
            container.get(IMetadataService)

    @pytest.mark.asyncio
    async def test_async_context_closes_services(self, container):
        """Test that leaving the context closes service sessions."""
        service = AsyncMock()
        container.register_instance(IMetadataService, service)

        async with container:
            pass

        service.close.assert_awaited_once()
