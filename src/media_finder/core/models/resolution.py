"""Natural-language resolution data models."""

from enum import Enum
from typing import List

from pydantic import BaseModel, Field, model_validator

from .media import MediaItem


class ResolutionResult(BaseModel):
    """Ordered, deduplicated media items for one description query."""

    query: str = Field(..., description="Original description query")
    candidates: List[str] = Field(
        default_factory=list, description="Titles suggested by the model, in order"
    )
    items: List[MediaItem] = Field(
        default_factory=list, description="Resolved items in candidate order"
    )
    failed_lookups: int = Field(default=0, ge=0, description="Lookups that raised an error")

    @model_validator(mode="after")
    def check_invariants(self) -> "ResolutionResult":
        """Enforce unique ids and at most one item per candidate."""
        ids = [item.id for item in self.items]
        if len(ids) != len(set(ids)):
            raise ValueError("Resolution result contains duplicate item ids")
        if len(self.items) > len(self.candidates):
            raise ValueError("Resolution result has more items than candidates")
        return self

    @property
    def is_empty(self) -> bool:
        """Check if nothing matched the description."""
        return not self.items


class SearchStatus(str, Enum):
    """Outcome shown for a natural-language search."""

    IDLE = "idle"
    RESULTS = "results"
    NO_MATCHES = "no_matches"
    CONFIGURATION_ERROR = "configuration_error"
    SEARCH_FAILED = "search_failed"
    INVALID_QUERY = "invalid_query"


class SearchView(BaseModel):
    """Presentation state of the latest natural-language search."""

    sequence: int = Field(default=0, description="Sequence number of the query")
    query: str = Field(default="", description="Query text")
    status: SearchStatus = Field(default=SearchStatus.IDLE, description="Search outcome")
    items: List[MediaItem] = Field(default_factory=list, description="Items to display")
    message: str = Field(default="", description="User-facing status message")

    @property
    def has_results(self) -> bool:
        """Check if there are items to display."""
        return self.status == SearchStatus.RESULTS
