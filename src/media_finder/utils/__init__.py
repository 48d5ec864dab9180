"""Utility functions and classes."""

from .exceptions import (
    CompletionServiceError,
    ConfigurationError,
    InvalidQueryError,
    MediaFinderError,
    MediaResolverError,
    MetadataServiceError,
)
from .text_utils import (
    MAX_CANDIDATE_TITLES,
    extract_candidate_titles,
    extract_json_array,
    is_blank,
    truncate_text,
)

__all__ = [
    "MediaFinderError",
    "ConfigurationError",
    "InvalidQueryError",
    "CompletionServiceError",
    "MetadataServiceError",
    "MediaResolverError",
    "MAX_CANDIDATE_TITLES",
    "extract_candidate_titles",
    "extract_json_array",
    "is_blank",
    "truncate_text",
]
