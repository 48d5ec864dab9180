"""Metadata service interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models import Credits, MediaDetails, MediaKind, MediaPage, Video


class IMetadataService(ABC):
    """Interface for media metadata services.

    All calls are read-only. Implementations do not retry; a failed
    request surfaces as a single MetadataServiceError, and a missing API
    key as a ConfigurationError raised before any request is made.
    """

    @abstractmethod
    async def search_movies(self, query: str, page: int = 1) -> MediaPage:
        """Search movies by title."""
        pass

    @abstractmethod
    async def search_tv(self, query: str, page: int = 1) -> MediaPage:
        """Search TV shows by name."""
        pass

    @abstractmethod
    async def search_multi(self, query: str, page: int = 1) -> MediaPage:
        """Search movies and TV shows together.

        Args:
            query: Search text.
            page: Result page.

        Returns:
            Page of movie and TV items in API relevance order. Results of
            other kinds (people) are excluded.

        Raises:
            ConfigurationError: If the API key is not configured.
            MetadataServiceError: If the request fails.
        """
        pass

    @abstractmethod
    async def get_listing(
        self, listing: str, kind: MediaKind = MediaKind.MOVIE, page: int = 1
    ) -> MediaPage:
        """Get a catalog listing such as ``popular`` or ``top_rated``."""
        pass

    @abstractmethod
    async def get_trending(
        self, kind: MediaKind = MediaKind.MOVIE, time_window: str = "week", page: int = 1
    ) -> MediaPage:
        """Get trending items for a day or week window."""
        pass

    @abstractmethod
    async def get_details(self, media_id: int, kind: MediaKind) -> Optional[MediaDetails]:
        """Get full details, or None if the item does not exist."""
        pass

    @abstractmethod
    async def get_credits(self, media_id: int, kind: MediaKind) -> Credits:
        """Get cast and crew."""
        pass

    @abstractmethod
    async def get_videos(self, media_id: int, kind: MediaKind) -> List[Video]:
        """Get trailers and other videos."""
        pass

    @abstractmethod
    async def get_recommendations(
        self, media_id: int, kind: MediaKind, page: int = 1
    ) -> MediaPage:
        """Get recommended items for a title."""
        pass

    @abstractmethod
    async def get_similar(self, media_id: int, kind: MediaKind, page: int = 1) -> MediaPage:
        """Get similar items for a title."""
        pass

    @abstractmethod
    def image_url(self, path: Optional[str], size: str = "w500") -> Optional[str]:
        """Build a full image URL for a poster, backdrop or profile path."""
        pass

    @abstractmethod
    def is_configured(self) -> bool:
        """Check if the service has the credentials it needs."""
        pass
