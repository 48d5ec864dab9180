"""TMDb service implementation."""

import asyncio
from typing import Any, Dict, List, Optional

import aiohttp
from pydantic import ValidationError

from ...config.models import Config
from ...infrastructure.logging import LoggerMixin
from ...utils import ConfigurationError, MetadataServiceError
from ..interfaces import IMetadataService
from ..models import (
    CastMember,
    Credits,
    CrewMember,
    Genre,
    MediaDetails,
    MediaItem,
    MediaKind,
    MediaPage,
    Person,
    Video,
)

# Catalog listings available per kind, mapped to their endpoint segment
LISTINGS: Dict[MediaKind, Dict[str, str]] = {
    MediaKind.MOVIE: {
        "popular": "popular",
        "top_rated": "top_rated",
        "now_playing": "now_playing",
        "upcoming": "upcoming",
    },
    MediaKind.TV: {
        "popular": "popular",
        "top_rated": "top_rated",
        "on_the_air": "on_the_air",
        "airing_today": "airing_today",
    },
}

TIME_WINDOWS = ("day", "week")


class TMDbService(IMetadataService, LoggerMixin):
    """TMDb service implementation."""

    def __init__(self, config: Config) -> None:
        """Initialize TMDb service.

        Args:
            config: Application configuration.
        """
        self._config = config
        self._tmdb_config = config.tmdb
        self._session: Optional[aiohttp.ClientSession] = None

    def is_configured(self) -> bool:
        """Check if a TMDb API key is configured."""
        return bool(self._tmdb_config.api_key)

    async def search_movies(self, query: str, page: int = 1) -> MediaPage:
        """Search movies by title.

        Args:
            query: Movie title to search for.
            page: Result page.

        Returns:
            Page of movie items.
        """
        data = await self._search("movie", query, page)
        return self._parse_page(data, MediaKind.MOVIE)

    async def search_tv(self, query: str, page: int = 1) -> MediaPage:
        """Search TV shows by name.

        Args:
            query: Show name to search for.
            page: Result page.

        Returns:
            Page of TV items.
        """
        data = await self._search("tv", query, page)
        return self._parse_page(data, MediaKind.TV)

    async def search_multi(self, query: str, page: int = 1) -> MediaPage:
        """Search movies and TV shows together.

        Args:
            query: Search text.
            page: Result page.

        Returns:
            Page of movie and TV items; people are dropped.
        """
        data = await self._search("multi", query, page)
        return self._parse_page(data)

    async def get_listing(
        self, listing: str, kind: MediaKind = MediaKind.MOVIE, page: int = 1
    ) -> MediaPage:
        """Get a catalog listing.

        Args:
            listing: Listing name, see ``LISTINGS``.
            kind: Movie or TV.
            page: Result page.

        Returns:
            Page of items.

        Raises:
            ValueError: If the listing is not available for the kind.
        """
        kind = MediaKind(kind)
        segment = LISTINGS[kind].get(listing)
        if segment is None:
            raise ValueError(
                f"Unknown {kind.value} listing '{listing}', "
                f"expected one of: {sorted(LISTINGS[kind])}"
            )

        data = await self._request(f"/{kind.value}/{segment}", {"page": page})
        return self._parse_page(data, kind)

    async def get_trending(
        self, kind: MediaKind = MediaKind.MOVIE, time_window: str = "week", page: int = 1
    ) -> MediaPage:
        """Get trending items.

        Args:
            kind: Movie or TV.
            time_window: ``day`` or ``week``.
            page: Result page.

        Returns:
            Page of trending items.
        """
        if time_window not in TIME_WINDOWS:
            raise ValueError(f"time_window must be one of: {TIME_WINDOWS}")

        kind = MediaKind(kind)
        data = await self._request(f"/trending/{kind.value}/{time_window}", {"page": page})
        return self._parse_page(data, kind)

    async def get_details(self, media_id: int, kind: MediaKind) -> Optional[MediaDetails]:
        """Get detailed information by TMDb ID.

        Args:
            media_id: TMDb ID.
            kind: Movie or TV.

        Returns:
            Detailed information or None if not found.
        """
        kind = MediaKind(kind)
        data = await self._request(f"/{kind.value}/{media_id}", allow_missing=True)
        if data is None:
            return None
        return self._parse_details(data, kind)

    async def get_credits(self, media_id: int, kind: MediaKind) -> Credits:
        """Get cast and crew.

        Args:
            media_id: TMDb ID.
            kind: Movie or TV.

        Returns:
            Credits.
        """
        kind = MediaKind(kind)
        data = await self._request(f"/{kind.value}/{media_id}/credits")
        return Credits(
            cast=[
                CastMember(
                    id=member["id"],
                    name=member.get("name", ""),
                    character=member.get("character") or "",
                    profile_path=member.get("profile_path"),
                    order=member.get("order", 0),
                )
                for member in data.get("cast", [])
            ],
            crew=[
                CrewMember(
                    id=member["id"],
                    name=member.get("name", ""),
                    job=member.get("job") or "",
                    department=member.get("department") or "",
                    profile_path=member.get("profile_path"),
                )
                for member in data.get("crew", [])
            ],
        )

    async def get_videos(self, media_id: int, kind: MediaKind) -> List[Video]:
        """Get videos (trailers, teasers, clips).

        Args:
            media_id: TMDb ID.
            kind: Movie or TV.

        Returns:
            List of videos.
        """
        kind = MediaKind(kind)
        data = await self._request(f"/{kind.value}/{media_id}/videos")
        return [
            Video(
                key=video["key"],
                name=video.get("name", ""),
                site=video.get("site", ""),
                type=video.get("type", ""),
                official=bool(video.get("official", False)),
                published_at=video.get("published_at"),
            )
            for video in data.get("results", [])
            if video.get("key")
        ]

    async def get_recommendations(
        self, media_id: int, kind: MediaKind, page: int = 1
    ) -> MediaPage:
        """Get recommended items for a title."""
        kind = MediaKind(kind)
        data = await self._request(f"/{kind.value}/{media_id}/recommendations", {"page": page})
        return self._parse_page(data, kind)

    async def get_similar(self, media_id: int, kind: MediaKind, page: int = 1) -> MediaPage:
        """Get similar items for a title."""
        kind = MediaKind(kind)
        data = await self._request(f"/{kind.value}/{media_id}/similar", {"page": page})
        return self._parse_page(data, kind)

    def image_url(self, path: Optional[str], size: str = "w500") -> Optional[str]:
        """Build a full image CDN URL.

        Args:
            path: Image path from an API response.
            size: TMDb size name, e.g. ``w185`` or ``original``.

        Returns:
            Image URL, or None when there is no image.
        """
        if not path:
            return None
        return f"{self._tmdb_config.image_base_url}/{size}{path}"

    async def _search(self, endpoint: str, query: str, page: int) -> Dict[str, Any]:
        params = {
            "query": query,
            "page": page,
            "include_adult": "true" if self._tmdb_config.include_adult else "false",
        }
        return await self._request(f"/search/{endpoint}", params)

    async def _request(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        allow_missing: bool = False,
    ) -> Any:
        """Issue a GET request against the TMDb API.

        Args:
            path: Endpoint path starting with ``/``.
            params: Extra query parameters.
            allow_missing: Return None on 404 instead of raising.

        Returns:
            Decoded JSON body, or None for a missing resource.

        Raises:
            ConfigurationError: If the API key is not configured.
            MetadataServiceError: If the request fails.
        """
        if not self.is_configured():
            raise ConfigurationError("TMDb API key is not configured")

        url = f"{self._tmdb_config.base_url}{path}"
        query = {"api_key": self._tmdb_config.api_key, "language": self._tmdb_config.language}
        if params:
            query.update({key: str(value) for key, value in params.items()})

        try:
            async with self._get_session().get(url, params=query) as response:
                if allow_missing and response.status == 404:
                    return None
                if response.status >= 400:
                    raise MetadataServiceError(
                        f"TMDb API error: {response.status} {response.reason}"
                    )
                return await response.json()

        except MetadataServiceError as e:
            self.logger.error(f"Request to {path} failed: {e}")
            raise
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            error_msg = f"TMDb request to {path} failed: {e}"
            self.logger.error(error_msg)
            raise MetadataServiceError(error_msg) from e

    def _parse_page(self, data: Dict[str, Any], kind: Optional[MediaKind] = None) -> MediaPage:
        """Parse a paged TMDb response.

        Args:
            data: TMDb response body.
            kind: Kind of all results, or None to read ``media_type`` per result.

        Returns:
            Page with results of unsupported kinds dropped.
        """
        results = data.get("results", [])
        if not isinstance(results, list):
            results = []

        items = []
        for result in results:
            item = self._parse_media_result(result, kind)
            if item is not None:
                items.append(item)

        return MediaPage(
            page=data.get("page", 1),
            results=items,
            total_pages=data.get("total_pages", 0),
            total_results=data.get("total_results", 0),
        )

    def _parse_media_result(
        self, data: Dict[str, Any], kind: Optional[MediaKind] = None
    ) -> Optional[MediaItem]:
        """Parse a movie or TV result into a MediaItem.

        Movies carry ``title`` and ``release_date``; TV shows carry ``name``
        and ``first_air_date``.

        Args:
            data: TMDb result data.
            kind: Known kind, or None to read ``media_type``.

        Returns:
            MediaItem, or None for other kinds (people) or malformed entries.
        """
        try:
            fields = self._item_fields(data, kind)
            if fields is None:
                return None
            return MediaItem(**fields)
        except (ValueError, TypeError, ValidationError) as e:
            self.logger.debug(f"Skipping malformed result {data.get('id')!r}: {e}")
            return None

    def _parse_details(self, data: Dict[str, Any], kind: MediaKind) -> MediaDetails:
        """Parse a details response."""
        fields = self._item_fields(data, kind)
        if fields is None:
            raise MetadataServiceError(f"Malformed {kind.value} details response")

        runtime = data.get("runtime")
        if runtime is None and data.get("episode_run_time"):
            runtime = data["episode_run_time"][0]

        return MediaDetails(
            **fields,
            genres=[Genre(id=g["id"], name=g["name"]) for g in data.get("genres", [])],
            tagline=data.get("tagline") or None,
            status=data.get("status"),
            runtime=runtime,
            number_of_seasons=data.get("number_of_seasons"),
            number_of_episodes=data.get("number_of_episodes"),
            last_air_date=data.get("last_air_date") or None,
            in_production=data.get("in_production"),
            budget=data.get("budget"),
            revenue=data.get("revenue"),
            spoken_languages=[
                lang.get("english_name") or lang.get("name", "")
                for lang in data.get("spoken_languages", [])
            ],
            production_companies=[c["name"] for c in data.get("production_companies", [])],
            created_by=[
                Person(id=p["id"], name=p["name"], profile_path=p.get("profile_path"))
                for p in data.get("created_by", [])
            ],
        )

    def _item_fields(
        self, data: Dict[str, Any], kind: Optional[MediaKind]
    ) -> Optional[Dict[str, Any]]:
        if kind is None:
            try:
                kind = MediaKind(data.get("media_type"))
            except ValueError:
                return None

        if data.get("id") is None:
            return None

        if kind == MediaKind.MOVIE:
            title = data.get("title") or data.get("original_title") or ""
            release_date = data.get("release_date")
        else:
            title = data.get("name") or data.get("original_name") or ""
            release_date = data.get("first_air_date")

        rating = data.get("vote_average") or 0.0

        return {
            "id": data["id"],
            "title": title,
            "kind": kind,
            "poster_path": data.get("poster_path"),
            "backdrop_path": data.get("backdrop_path"),
            "rating": min(max(float(rating), 0.0), 10.0),
            "vote_count": data.get("vote_count") or 0,
            "release_date": release_date,
            "overview": data.get("overview") or "",
            "popularity": data.get("popularity"),
            "genre_ids": data.get("genre_ids") or [],
        }

    def _get_session(self) -> aiohttp.ClientSession:
        """Get or create HTTP session.

        Returns:
            HTTP session.
        """
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(total=self._tmdb_config.timeout)
            self._session = aiohttp.ClientSession(timeout=timeout)
        return self._session

    async def close(self) -> None:
        """Close HTTP session."""
        if self._session:
            await self._session.close()
            self._session = None

    async def __aenter__(self) -> "TMDbService":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()

    def __del__(self) -> None:
        """Cleanup on deletion."""
        if self._session and not self._session.closed:
            import logging

            logging.getLogger(__name__).debug("TMDbService session not properly closed")
