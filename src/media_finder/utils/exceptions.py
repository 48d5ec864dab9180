"""Custom exceptions for the application."""


class MediaFinderError(Exception):
    """Base exception for all application errors."""

    pass


class ConfigurationError(MediaFinderError):
    """Configuration-related errors, such as a missing API key."""

    pass


class InvalidQueryError(MediaFinderError):
    """Raised when user input is rejected before any request is made."""

    pass


class CompletionServiceError(MediaFinderError):
    """Completion (LLM) service errors."""

    pass


class MetadataServiceError(MediaFinderError):
    """Metadata (TMDb) service errors."""

    pass


class MediaResolverError(MediaFinderError):
    """Natural-language resolution errors."""

    pass
