"""Prompt builders for completion requests.

Title-list prompts must keep asking for one title per line with no
numbering; ``extract_candidate_titles`` relies on that layout.
"""

from typing import List, Optional

from ..models import ChatMessage


def build_description_search_prompt(description: str, count: int) -> str:
    """Build the prompt that turns a description into candidate titles.

    Args:
        description: User's free-text description.
        count: Number of titles to request.

    Returns:
        Prompt text.
    """
    return (
        f'Based on this description: "{description}", suggest {count} specific movie '
        "or TV show titles that match. Consider the mood, genre, themes, time period, "
        "or any other details mentioned. Return ONLY the titles, one per line, without "
        "numbering, explanations, or additional text. Focus on well-known titles that "
        "are likely to be in the TMDB database."
    )


def build_similar_titles_prompt(
    title: str, genres: List[str], count: int, preferences: Optional[str] = None
) -> str:
    """Build the prompt for titles similar to a given one."""
    genres_text = ", ".join(genres) if genres else "unknown genres"
    preferences_text = f" User preferences: {preferences}." if preferences else ""
    return (
        f'Based on "{title}" which is in the genres: {genres_text}.{preferences_text} '
        f"Suggest {count} similar titles that the user might enjoy. Provide only the "
        "titles, one per line, without numbering or additional text."
    )


def build_summary_prompt(title: str, overview: str) -> str:
    """Build the prompt for a short spoiler-free summary."""
    return (
        f'Provide a concise and engaging summary of "{title}" in 2-3 sentences. '
        f"Here's the overview: {overview}. Focus on the main plot points and what "
        "makes it interesting, without spoilers."
    )


def build_themes_prompt(title: str, overview: str) -> str:
    """Build the prompt for a theme analysis."""
    return (
        f'Analyze the main themes and deeper meanings in "{title}". Overview: {overview}. '
        "Provide a thoughtful analysis in 3-4 sentences covering the central themes, "
        "symbolism, or social commentary."
    )


def build_quiz_prompt(title: str, overview: str, count: int = 3) -> str:
    """Build the prompt for multiple-choice trivia questions."""
    return (
        f'Create {count} multiple-choice trivia questions about "{title}". '
        f"Overview: {overview}. Format each question as JSON with: question, options "
        "(array of 4), and correctAnswer (index 0-3). Return as a JSON array."
    )


def build_chat_prompt(
    title: str,
    overview: str,
    question: str,
    history: Optional[List[ChatMessage]] = None,
) -> str:
    """Build a chat prompt with earlier turns folded in.

    Args:
        title: Title under discussion.
        overview: Its overview.
        question: Latest user question.
        history: Earlier turns, oldest first.

    Returns:
        Prompt text.
    """
    lines = [
        f'You are a knowledgeable movie and TV expert assistant. You\'re discussing "{title}". '
        f"Here's the overview: {overview}.",
        "",
    ]

    if history:
        lines.append("Previous conversation:")
        lines.extend(f"{message.role}: {message.text}" for message in history)
        lines.append("")

    lines.append(f"User question: {question}")
    lines.append("")
    lines.append(
        "Provide a helpful, informative response. Keep it concise (2-4 sentences) and accurate."
    )

    return "\n".join(lines)
