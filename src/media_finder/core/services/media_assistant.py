"""Media assistant service implementation."""

from typing import List, Optional

from pydantic import ValidationError

from ...config.models import Config
from ...infrastructure.logging import LoggerMixin
from ...utils import InvalidQueryError, extract_candidate_titles, extract_json_array, is_blank
from ..interfaces import ICompletionService, IMediaAssistant
from ..models import ChatMessage, QuizQuestion
from .prompts import (
    build_chat_prompt,
    build_quiz_prompt,
    build_similar_titles_prompt,
    build_summary_prompt,
    build_themes_prompt,
)


class MediaAssistant(IMediaAssistant, LoggerMixin):
    """LLM-backed summaries, theme analysis, chat and trivia for one title."""

    def __init__(self, config: Config, completion_service: ICompletionService):
        """Initialize media assistant.

        Args:
            config: Application configuration.
            completion_service: Completion service used for every feature.
        """
        self._config = config
        self._completion_service = completion_service

    async def summarize(self, title: str, overview: str) -> str:
        """Write a 2-3 sentence spoiler-free summary."""
        self._require_title(title)
        text = await self._completion_service.complete(build_summary_prompt(title, overview))
        return text.strip()

    async def analyze_themes(self, title: str, overview: str) -> str:
        """Write a 3-4 sentence theme analysis."""
        self._require_title(title)
        text = await self._completion_service.complete(build_themes_prompt(title, overview))
        return text.strip()

    async def chat(
        self,
        title: str,
        overview: str,
        question: str,
        history: Optional[List[ChatMessage]] = None,
    ) -> str:
        """Answer a question about a title.

        The service is stateless, so the caller keeps the history and passes
        it back on every turn.

        Args:
            title: Title under discussion.
            overview: Its overview.
            question: Latest question.
            history: Earlier turns, oldest first.

        Returns:
            Answer text.
        """
        self._require_title(title)
        if is_blank(question):
            raise InvalidQueryError("Question must not be empty")

        prompt = build_chat_prompt(title, overview, question.strip(), history)
        text = await self._completion_service.complete(prompt)
        return text.strip()

    async def suggest_similar(
        self, title: str, genres: List[str], preferences: Optional[str] = None
    ) -> List[str]:
        """Suggest titles similar to the given one.

        Args:
            title: Reference title.
            genres: Genre names of the reference title.
            preferences: Optional free-text preferences.

        Returns:
            Suggested titles, at most ``search.suggestion_count``.
        """
        self._require_title(title)
        count = self._config.search.suggestion_count
        prompt = build_similar_titles_prompt(title, genres, count, preferences)
        text = await self._completion_service.complete(prompt)
        return extract_candidate_titles(text, count)

    async def generate_quiz(self, title: str, overview: str) -> List[QuizQuestion]:
        """Generate multiple-choice trivia questions.

        Returns:
            Parsed questions. Malformed entries are skipped; output without
            a JSON array gives an empty list.
        """
        self._require_title(title)
        text = await self._completion_service.complete(build_quiz_prompt(title, overview))

        data = extract_json_array(text)
        if data is None:
            self.logger.warning(f"Quiz response for '{title}' contained no JSON array")
            return []

        questions = []
        for entry in data:
            if not isinstance(entry, dict):
                continue
            try:
                questions.append(QuizQuestion.model_validate(entry))
            except ValidationError as e:
                self.logger.debug(f"Skipping malformed quiz question: {e}")

        return questions

    def _require_title(self, title: str) -> None:
        if is_blank(title):
            raise InvalidQueryError("Title must not be empty")
