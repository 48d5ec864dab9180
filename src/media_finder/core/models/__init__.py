"""Core data models."""

from .assistant import ChatMessage, QuizQuestion
from .media import (
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
    pick_trailer,
)
from .resolution import ResolutionResult, SearchStatus, SearchView

__all__ = [
    "MediaKind",
    "MediaItem",
    "MediaPage",
    "MediaDetails",
    "Genre",
    "Person",
    "CastMember",
    "CrewMember",
    "Credits",
    "Video",
    "pick_trailer",
    "ResolutionResult",
    "SearchStatus",
    "SearchView",
    "ChatMessage",
    "QuizQuestion",
]
