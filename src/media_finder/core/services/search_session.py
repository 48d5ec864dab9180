"""Search session: presentation state for natural-language search."""

from typing import List, Optional

from ...infrastructure.logging import LoggerMixin
from ...utils import (
    CompletionServiceError,
    ConfigurationError,
    InvalidQueryError,
    MediaResolverError,
)
from ..interfaces import IMediaResolver
from ..models import SearchStatus, SearchView

EXAMPLE_QUERIES: List[str] = [
    "A mind-bending sci-fi movie",
    "Romantic comedy set in New York",
    "Dark thriller with plot twists",
    "Adventure movie with treasure hunting",
]

MESSAGES = {
    SearchStatus.INVALID_QUERY: "Describe what you would like to watch first.",
    SearchStatus.CONFIGURATION_ERROR: (
        "AI search is not configured. Check the TMDb and LLM API keys in your setup."
    ),
    SearchStatus.SEARCH_FAILED: "The search failed. Please try again in a moment.",
    SearchStatus.NO_MATCHES: "No titles matched that description. Try rephrasing it.",
}


class SearchSession(LoggerMixin):
    """Track the latest natural-language search for one UI surface.

    Every submit gets a sequence number. A result is only applied when no
    newer submit (or clear) happened while it was in flight; stale results
    are discarded. In-flight lookups are never cancelled.
    """

    def __init__(self, resolver: IMediaResolver):
        """Initialize search session.

        Args:
            resolver: Media resolver used for every query.
        """
        self._resolver = resolver
        self._sequence = 0
        self._current = SearchView()

    @property
    def current(self) -> SearchView:
        """Get the view for the latest applied search."""
        return self._current

    @property
    def sequence(self) -> int:
        """Get the sequence number of the latest submit or clear."""
        return self._sequence

    async def submit(self, query: str) -> Optional[SearchView]:
        """Run a search and apply its outcome if it is still the latest.

        Args:
            query: Free-text description.

        Returns:
            The applied view, or None if a newer query superseded this one.
        """
        self._sequence += 1
        sequence = self._sequence

        view = await self._run(sequence, query)

        if sequence != self._sequence:
            self.logger.debug(
                f"Discarding stale results for query #{sequence} (latest is #{self._sequence})"
            )
            return None

        self._current = view
        return view

    def clear(self) -> None:
        """Reset to idle and discard any search still in flight."""
        self._sequence += 1
        self._current = SearchView(sequence=self._sequence)

    async def _run(self, sequence: int, query: str) -> SearchView:
        try:
            result = await self._resolver.resolve_by_description(query)
        except InvalidQueryError:
            return self._view(sequence, query, SearchStatus.INVALID_QUERY)
        except ConfigurationError as e:
            self.logger.error(f"Search unavailable: {e}")
            return self._view(sequence, query, SearchStatus.CONFIGURATION_ERROR)
        except (MediaResolverError, CompletionServiceError) as e:
            self.logger.error(f"Search failed: {e}")
            return self._view(sequence, query, SearchStatus.SEARCH_FAILED)

        if result.is_empty:
            return self._view(sequence, query, SearchStatus.NO_MATCHES)

        return SearchView(
            sequence=sequence,
            query=result.query,
            status=SearchStatus.RESULTS,
            items=result.items,
            message=f"Found {len(result.items)} title(s)",
        )

    @staticmethod
    def _view(sequence: int, query: str, status: SearchStatus) -> SearchView:
        return SearchView(sequence=sequence, query=query, status=status, message=MESSAGES[status])
