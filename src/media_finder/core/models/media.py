"""Media-related data models."""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class MediaKind(str, Enum):
    """Kind of media item."""

    MOVIE = "movie"
    TV = "tv"


class Genre(BaseModel):
    """Genre as returned by TMDb."""

    id: int = Field(..., description="TMDb genre ID")
    name: str = Field(..., description="Genre name")


class MediaItem(BaseModel):
    """Normalized movie or TV show record used for display."""

    id: int = Field(..., description="TMDb ID")
    title: str = Field(..., description="Display title (movie title or show name)")
    kind: MediaKind = Field(..., description="Whether this is a movie or a TV show")
    poster_path: Optional[str] = Field(None, description="Poster image path")
    backdrop_path: Optional[str] = Field(None, description="Backdrop image path")
    rating: float = Field(default=0.0, ge=0.0, le=10.0, description="Average rating (0-10)")
    vote_count: int = Field(default=0, description="Number of votes")
    release_date: Optional[str] = Field(
        None, description="Release date (movie) or first air date (TV), YYYY-MM-DD"
    )
    overview: str = Field(default="", description="Plot overview")
    popularity: Optional[float] = Field(None, description="TMDb popularity score")
    genre_ids: List[int] = Field(default_factory=list, description="TMDb genre IDs")

    @field_validator("release_date", mode="before")
    @classmethod
    def empty_date_to_none(cls, v: Optional[str]) -> Optional[str]:
        """TMDb sends an empty string for unknown dates."""
        return v or None

    @property
    def year(self) -> Optional[int]:
        """Get release year."""
        if not self.release_date:
            return None
        try:
            return int(self.release_date[:4])
        except ValueError:
            return None

    @property
    def is_movie(self) -> bool:
        """Check if this item is a movie."""
        return self.kind == MediaKind.MOVIE


class MediaPage(BaseModel):
    """One page of search or listing results."""

    page: int = Field(default=1, description="Page number")
    results: List[MediaItem] = Field(default_factory=list, description="Items on this page")
    total_pages: int = Field(default=0, description="Total number of pages")
    total_results: int = Field(default=0, description="Total number of results")

    @property
    def has_next(self) -> bool:
        """Check if another page is available."""
        return self.page < self.total_pages


class Person(BaseModel):
    """Named person reference (creator, company contact)."""

    id: int
    name: str
    profile_path: Optional[str] = None


class MediaDetails(MediaItem):
    """Full record for a detail view."""

    genres: List[Genre] = Field(default_factory=list, description="Genres")
    tagline: Optional[str] = Field(None, description="Tagline")
    status: Optional[str] = Field(None, description="Release or production status")
    runtime: Optional[int] = Field(None, description="Runtime (or episode runtime) in minutes")
    number_of_seasons: Optional[int] = Field(None, description="Season count (TV)")
    number_of_episodes: Optional[int] = Field(None, description="Episode count (TV)")
    last_air_date: Optional[str] = Field(None, description="Last air date (TV)")
    in_production: Optional[bool] = Field(None, description="Still in production (TV)")
    budget: Optional[int] = Field(None, description="Budget in USD (movie)")
    revenue: Optional[int] = Field(None, description="Revenue in USD (movie)")
    spoken_languages: List[str] = Field(default_factory=list, description="Spoken languages")
    production_companies: List[str] = Field(
        default_factory=list, description="Production company names"
    )
    created_by: List[Person] = Field(default_factory=list, description="Creators (TV)")

    @property
    def genre_names(self) -> List[str]:
        """Get genre names."""
        return [genre.name for genre in self.genres]


class CastMember(BaseModel):
    """Cast credit."""

    id: int
    name: str
    character: str = ""
    profile_path: Optional[str] = None
    order: int = 0


class CrewMember(BaseModel):
    """Crew credit."""

    id: int
    name: str
    job: str = ""
    department: str = ""
    profile_path: Optional[str] = None


class Credits(BaseModel):
    """Cast and crew for a movie or TV show."""

    cast: List[CastMember] = Field(default_factory=list)
    crew: List[CrewMember] = Field(default_factory=list)

    @property
    def directors(self) -> List[CrewMember]:
        """Get crew members credited as director."""
        return [member for member in self.crew if member.job == "Director"]

    def top_cast(self, limit: int = 10) -> List[CastMember]:
        """Get the first cast members in billing order."""
        return sorted(self.cast, key=lambda member: member.order)[:limit]


class Video(BaseModel):
    """Trailer, teaser or clip hosted on an external site."""

    key: str
    name: str = ""
    site: str = ""
    type: str = ""
    official: bool = False
    published_at: Optional[str] = None

    @property
    def url(self) -> Optional[str]:
        """Get a watch URL for supported sites."""
        if self.site == "YouTube":
            return f"https://www.youtube.com/watch?v={self.key}"
        if self.site == "Vimeo":
            return f"https://vimeo.com/{self.key}"
        return None


def pick_trailer(videos: List[Video]) -> Optional[Video]:
    """Pick the best trailer from a list of videos.

    Prefers an official YouTube trailer, then any YouTube trailer.
    """
    trailers = [v for v in videos if v.site == "YouTube" and v.type == "Trailer"]
    for video in trailers:
        if video.official:
            return video
    return trailers[0] if trailers else None
