"""Completion service interface."""

from abc import ABC, abstractmethod


class ICompletionService(ABC):
    """Interface for LLM text completion services."""

    @abstractmethod
    async def complete(self, prompt: str) -> str:
        """Send a single prompt and return the model's text.

        Calls are stateless; any conversation history must already be
        folded into the prompt.

        Args:
            prompt: Full prompt text.

        Returns:
            Completion text.

        Raises:
            ConfigurationError: If the API key is not configured.
            CompletionServiceError: If the request fails.
        """
        pass

    @abstractmethod
    def is_configured(self) -> bool:
        """Check if the service has the credentials it needs.

        Returns:
            True if requests can be issued.
        """
        pass
