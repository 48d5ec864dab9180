"""Core service implementations."""

from .llm_services import AnthropicCompletionService, OpenAICompletionService
from .media_assistant import MediaAssistant
from .media_resolver import MediaResolver
from .search_session import EXAMPLE_QUERIES, SearchSession
from .tmdb_service import TMDbService

__all__ = [
    "OpenAICompletionService",
    "AnthropicCompletionService",
    "TMDbService",
    "MediaResolver",
    "MediaAssistant",
    "SearchSession",
    "EXAMPLE_QUERIES",
]
