"""Media resolver service implementation."""

import asyncio
from typing import List, Optional, Sequence, Tuple

from ...config.models import Config
from ...infrastructure.logging import LoggerMixin
from ...utils import (
    ConfigurationError,
    InvalidQueryError,
    MAX_CANDIDATE_TITLES,
    MediaResolverError,
    extract_candidate_titles,
    is_blank,
)
from ..interfaces import ICompletionService, IMediaResolver, IMetadataService
from ..models import MediaItem, ResolutionResult
from .prompts import build_description_search_prompt

LookupOutcome = Tuple[Optional[MediaItem], Optional[Exception]]


class MediaResolver(IMediaResolver, LoggerMixin):
    """Resolve a free-text description into concrete media items.

    Flow:
    - ask the completion service for candidate titles
    - extract one title per line
    - search every title concurrently, first movie/TV hit wins
    - drop misses and duplicate ids, keeping the model's order
    """

    def __init__(
        self,
        config: Config,
        completion_service: ICompletionService,
        metadata_service: IMetadataService,
    ):
        """Initialize media resolver.

        Args:
            config: Application configuration.
            completion_service: Completion service that proposes titles.
            metadata_service: Metadata service used to look titles up.
        """
        self._config = config
        self._completion_service = completion_service
        self._metadata_service = metadata_service
        # Config may lower the fan-out, never raise it above the hard cap
        self._max_candidates = min(config.search.max_candidates, MAX_CANDIDATE_TITLES)

    async def resolve_by_description(self, query: str) -> ResolutionResult:
        """Resolve a free-text description into concrete media items.

        Args:
            query: Free-text description.

        Returns:
            Resolution result; empty when no candidate matched.

        Raises:
            InvalidQueryError: If the query is empty or whitespace.
            ConfigurationError: If a required API key is not configured.
            MediaResolverError: If the completion request fails.
        """
        if is_blank(query):
            raise InvalidQueryError("Search query must not be empty")

        query = query.strip()
        self.logger.info(f"Resolving description: {query}")

        candidates = await self._suggest_titles(query)
        self.logger.debug(f"Candidate titles: {candidates}")

        outcomes = await self.resolve_candidates(candidates)
        items = self.reconcile([item for item, _ in outcomes])
        failures = [error for _, error in outcomes if error is not None]

        if not items:
            config_errors = [e for e in failures if isinstance(e, ConfigurationError)]
            if config_errors:
                raise config_errors[0]

        self.logger.info(
            f"Resolved {len(items)} of {len(candidates)} candidate(s) "
            f"({len(failures)} failed lookup(s))"
        )

        return ResolutionResult(
            query=query,
            candidates=candidates,
            items=items,
            failed_lookups=len(failures),
        )

    async def resolve_candidates(self, candidates: Sequence[str]) -> List[LookupOutcome]:
        """Look up every candidate title concurrently.

        Args:
            candidates: Candidate titles in suggestion order.

        Returns:
            One ``(item, error)`` pair per candidate, in candidate order. The
            item is None on a miss or a failure; the error is set on failure.
        """
        return list(await asyncio.gather(*(self._lookup(title) for title in candidates)))

    @staticmethod
    def reconcile(matches: Sequence[Optional[MediaItem]]) -> List[MediaItem]:
        """Assemble the display sequence from position-ordered matches.

        Args:
            matches: Optional match per candidate, in candidate order.

        Returns:
            Present matches in order, each item id at most once.
        """
        seen = set()
        items = []
        for item in matches:
            if item is None or item.id in seen:
                continue
            seen.add(item.id)
            items.append(item)
        return items

    async def _suggest_titles(self, query: str) -> List[str]:
        prompt = build_description_search_prompt(query, self._max_candidates)

        try:
            text = await self._completion_service.complete(prompt)
        except ConfigurationError:
            raise
        except Exception as e:
            error_msg = f"Search failed for '{query}': {e}"
            self.logger.error(error_msg)
            raise MediaResolverError(error_msg) from e

        return extract_candidate_titles(text, self._max_candidates)

    async def _lookup(self, title: str) -> LookupOutcome:
        """Look up one candidate; failures stay local to this candidate."""
        try:
            page = await self._metadata_service.search_multi(title)
        except Exception as e:
            self.logger.warning(f"Lookup failed for candidate '{title}': {e}")
            return None, e

        if not page.results:
            self.logger.debug(f"No match for candidate '{title}'")
            return None, None

        return page.results[0], None
