"""Text processing utilities."""

import json
import re
from typing import Any, List, Optional

# Upper bound on titles taken from one completion, bounds the lookup fan-out
MAX_CANDIDATE_TITLES = 8

_NUMBERED_LINE = re.compile(r"^\d+\.")
_JSON_ARRAY = re.compile(r"\[.*\]", re.DOTALL)


def is_blank(text: Optional[str]) -> bool:
    """Check whether text is None, empty or whitespace only."""
    return text is None or not text.strip()


def extract_candidate_titles(text: str, limit: int = MAX_CANDIDATE_TITLES) -> List[str]:
    """Extract candidate titles from a freeform completion.

    The model is asked for one title per line with no numbering. Lines that
    still carry a numbering prefix (``1.``) are dropped rather than repaired.
    Prose output degrades to one candidate per non-empty line.

    Args:
        text: Raw completion text.
        limit: Maximum number of titles to return.

    Returns:
        Trimmed titles in their original order.
    """
    if not text:
        return []

    titles = []
    for line in text.splitlines():
        line = line.strip()
        if not line or _NUMBERED_LINE.match(line):
            continue
        titles.append(line)
        if len(titles) >= limit:
            break

    return titles


def extract_json_array(text: str) -> Optional[List[Any]]:
    """Extract the first JSON array embedded in text.

    Args:
        text: Text that may wrap a JSON array in prose or code fences.

    Returns:
        Parsed list, or None if no valid array is found.
    """
    match = _JSON_ARRAY.search(text or "")
    if not match:
        return None

    try:
        data = json.loads(match.group(0))
    except json.JSONDecodeError:
        return None

    return data if isinstance(data, list) else None


def truncate_text(text: str, max_length: int) -> str:
    """Truncate text to a maximum length, adding an ellipsis.

    Args:
        text: Text to truncate.
        max_length: Maximum length before the ellipsis.

    Returns:
        Original or truncated text.
    """
    if len(text) <= max_length:
        return text
    return text[:max_length].strip() + "..."
