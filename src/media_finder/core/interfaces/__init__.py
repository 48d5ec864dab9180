"""Core interfaces for dependency injection."""

from .completion_service import ICompletionService
from .media_assistant import IMediaAssistant
from .media_resolver import IMediaResolver
from .metadata_service import IMetadataService

__all__ = [
    "ICompletionService",
    "IMetadataService",
    "IMediaResolver",
    "IMediaAssistant",
]
