"""Completion (LLM) service implementations."""

from abc import ABC, abstractmethod
from typing import Any, Optional

from ...config.models import Config
from ...infrastructure.logging import LoggerMixin
from ...utils import CompletionServiceError, ConfigurationError
from ..interfaces import ICompletionService


class BaseCompletionService(ICompletionService, LoggerMixin, ABC):
    """Base completion service with common functionality."""

    provider_name = "LLM"

    def __init__(self, config: Config):
        """Initialize completion service.

        Args:
            config: Application configuration.
        """
        self._config = config
        self._llm_config = config.llm
        self._client: Optional[Any] = None

    def is_configured(self) -> bool:
        """Check if an API key is configured."""
        return bool(self._llm_config.api_key)

    async def complete(self, prompt: str) -> str:
        """Send a prompt and return the completion text.

        Args:
            prompt: Full prompt text.

        Returns:
            Completion text.

        Raises:
            ConfigurationError: If the API key is not configured.
            CompletionServiceError: If the request fails.
        """
        if not self.is_configured():
            raise ConfigurationError(f"{self.provider_name} API key is not configured")

        self.logger.debug(f"Requesting completion from {self._llm_config.model}")

        try:
            text = await self._make_llm_request(prompt)
        except ConfigurationError:
            raise
        except CompletionServiceError as e:
            self.logger.error(f"Completion failed: {e}")
            raise
        except Exception as e:
            error_msg = f"{self.provider_name} API request failed: {e}"
            self.logger.error(error_msg)
            raise CompletionServiceError(error_msg) from e

        if not text or not text.strip():
            raise CompletionServiceError(f"{self.provider_name} API returned empty content")

        return text

    def _get_client(self) -> Any:
        """Get or create the SDK client."""
        if self._client is None:
            self._client = self._create_client()
        return self._client

    @abstractmethod
    def _create_client(self) -> Any:
        """Create the provider SDK client.

        Returns:
            Async SDK client.
        """
        pass

    @abstractmethod
    async def _make_llm_request(self, prompt: str) -> Optional[str]:
        """Make request to the provider.

        Args:
            prompt: Prompt text.

        Returns:
            Completion text.
        """
        pass


class OpenAICompletionService(BaseCompletionService):
    """OpenAI completion service implementation."""

    provider_name = "OpenAI"

    def _create_client(self) -> Any:
        try:
            import openai
        except ImportError:
            raise ConfigurationError(
                "OpenAI package not installed. Install with: pip install openai"
            )

        return openai.AsyncOpenAI(
            api_key=self._llm_config.api_key, timeout=self._llm_config.timeout
        )

    async def _make_llm_request(self, prompt: str) -> Optional[str]:
        """Make request to OpenAI API.

        Args:
            prompt: Prompt text.

        Returns:
            Completion text.
        """
        response = await self._get_client().chat.completions.create(
            model=self._llm_config.model,
            messages=[{"role": "user", "content": prompt}],
            max_tokens=self._llm_config.max_tokens,
            temperature=self._llm_config.temperature,
        )

        return response.choices[0].message.content


class AnthropicCompletionService(BaseCompletionService):
    """Anthropic (Claude) completion service implementation."""

    provider_name = "Anthropic"

    def _create_client(self) -> Any:
        try:
            import anthropic
        except ImportError:
            raise ConfigurationError(
                "Anthropic package not installed. Install with: pip install anthropic"
            )

        return anthropic.AsyncAnthropic(
            api_key=self._llm_config.api_key, timeout=self._llm_config.timeout
        )

    async def _make_llm_request(self, prompt: str) -> Optional[str]:
        """Make request to Anthropic API.

        Args:
            prompt: Prompt text.

        Returns:
            Completion text.
        """
        response = await self._get_client().messages.create(
            model=self._llm_config.model,
            max_tokens=self._llm_config.max_tokens,
            temperature=self._llm_config.temperature,
            messages=[{"role": "user", "content": prompt}],
        )

        parts = [block.text for block in response.content if hasattr(block, "text")]
        if not parts:
            raise CompletionServiceError("Anthropic API returned unexpected content type")
        return "".join(parts)
