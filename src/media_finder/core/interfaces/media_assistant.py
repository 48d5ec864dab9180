"""Media assistant interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models import ChatMessage, QuizQuestion


class IMediaAssistant(ABC):
    """Interface for LLM-backed features on a single title."""

    @abstractmethod
    async def summarize(self, title: str, overview: str) -> str:
        """Write a short spoiler-free summary.

        Raises:
            CompletionServiceError: If the request fails.
        """
        pass

    @abstractmethod
    async def analyze_themes(self, title: str, overview: str) -> str:
        """Describe the central themes of a title.

        Raises:
            CompletionServiceError: If the request fails.
        """
        pass

    @abstractmethod
    async def chat(
        self,
        title: str,
        overview: str,
        question: str,
        history: Optional[List[ChatMessage]] = None,
    ) -> str:
        """Answer a question about a title, given earlier turns.

        Raises:
            InvalidQueryError: If the question is empty.
            CompletionServiceError: If the request fails.
        """
        pass

    @abstractmethod
    async def suggest_similar(
        self, title: str, genres: List[str], preferences: Optional[str] = None
    ) -> List[str]:
        """Suggest titles similar to the given one.

        Raises:
            CompletionServiceError: If the request fails.
        """
        pass

    @abstractmethod
    async def generate_quiz(self, title: str, overview: str) -> List[QuizQuestion]:
        """Generate multiple-choice trivia questions.

        Raises:
            CompletionServiceError: If the request fails.
        """
        pass
