"""Media resolver interface."""

from abc import ABC, abstractmethod

from ..models import ResolutionResult


class IMediaResolver(ABC):
    """Interface for natural-language media resolution."""

    @abstractmethod
    async def resolve_by_description(self, query: str) -> ResolutionResult:
        """Resolve a free-text description into concrete media items.

        Args:
            query: Free-text description of what the user wants to watch.

        Returns:
            Resolution result; an empty result means nothing matched.

        Raises:
            InvalidQueryError: If the query is empty or whitespace.
            ConfigurationError: If a required API key is not configured.
            MediaResolverError: If the completion request fails.
        """
        pass
