"""Test completion services."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from media_finder.config import ConfigManager
from media_finder.core.services import AnthropicCompletionService, OpenAICompletionService
from media_finder.utils import CompletionServiceError, ConfigurationError


def openai_client(content):
    """Build a fake OpenAI client returning the given message content."""
    response = SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=content))]
    )
    client = MagicMock()
    client.chat.completions.create = AsyncMock(return_value=response)
    return client


class TestOpenAICompletionService:
    """Test OpenAICompletionService."""

    @pytest.mark.asyncio
    async def test_complete(self, config):
        """Test a successful completion."""
        service = OpenAICompletionService(config)
        client = openai_client("Inception\nInterstellar")

        with patch.object(service, "_get_client", return_value=client):
            text = await service.complete("suggest titles")

        assert text == "Inception\nInterstellar"
        kwargs = client.chat.completions.create.await_args.kwargs
        assert kwargs["model"] == "gpt-4o-mini"
        assert kwargs["messages"] == [{"role": "user", "content": "suggest titles"}]

    @pytest.mark.asyncio
    async def test_missing_key(self, unconfigured_config_file):
        """Test that a missing key fails before any client is created."""
        config = ConfigManager(unconfigured_config_file, load_env_file=False).load_config()
        service = OpenAICompletionService(config)

        with patch.object(service, "_get_client") as get_client:
            with pytest.raises(ConfigurationError):
                await service.complete("prompt")

        get_client.assert_not_called()
        assert not service.is_configured()

    @pytest.mark.asyncio
    async def test_request_failure_is_wrapped(self, config):
        """Test that SDK errors become completion errors."""
        service = OpenAICompletionService(config)
        client = MagicMock()
        client.chat.completions.create = AsyncMock(side_effect=RuntimeError("quota exceeded"))

        with patch.object(service, "_get_client", return_value=client):
            with pytest.raises(CompletionServiceError, match="quota exceeded"):
                await service.complete("prompt")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content", [None, "", "   \n"])
    async def test_empty_content(self, config, content):
        """Test that empty completions are errors."""
        service = OpenAICompletionService(config)

        with patch.object(service, "_get_client", return_value=openai_client(content)):
            with pytest.raises(CompletionServiceError, match="empty"):
                await service.complete("prompt")


class TestAnthropicCompletionService:
    """Test AnthropicCompletionService."""

    @pytest.mark.asyncio
    async def test_complete_joins_text_blocks(self, config):
        """Test that text blocks are concatenated."""
        service = AnthropicCompletionService(config)
        response = SimpleNamespace(
            content=[SimpleNamespace(text="Inception\n"), SimpleNamespace(text="Tenet")]
        )
        client = MagicMock()
        client.messages.create = AsyncMock(return_value=response)

        with patch.object(service, "_get_client", return_value=client):
            text = await service.complete("prompt")

        assert text == "Inception\nTenet"

    @pytest.mark.asyncio
    async def test_non_text_content(self, config):
        """Test that responses without text blocks are errors."""
        service = AnthropicCompletionService(config)
        client = MagicMock()
        client.messages.create = AsyncMock(
            return_value=SimpleNamespace(content=[SimpleNamespace(type="tool_use")])
        )

        with patch.object(service, "_get_client", return_value=client):
            with pytest.raises(CompletionServiceError, match="unexpected content"):
                await service.complete("prompt")
