"""Test data models."""

import pytest
from pydantic import ValidationError

from media_finder.core.models import (
    MediaItem,
    MediaKind,
    MediaPage,
    QuizQuestion,
    ResolutionResult,
    Video,
    pick_trailer,
)


class TestMediaItem:
    """Test MediaItem."""

    def test_year(self, item_factory):
        """Test year extraction."""
        assert item_factory(1, "A", release_date="1999-03-31").year == 1999
        assert item_factory(1, "A", release_date="").year is None
        assert item_factory(1, "A", release_date=None).year is None

    def test_rating_bounds(self):
        """Test that ratings outside 0-10 are rejected."""
        with pytest.raises(ValidationError):
            MediaItem(id=1, title="A", kind=MediaKind.MOVIE, rating=11)

    def test_kind_from_string(self):
        """Test kind coercion."""
        item = MediaItem(id=1, title="A", kind="tv")

        assert item.kind == MediaKind.TV
        assert not item.is_movie


def test_media_page_has_next():
    """Test pagination helper."""
    assert MediaPage(page=1, total_pages=2).has_next
    assert not MediaPage(page=2, total_pages=2).has_next


class TestResolutionResult:
    """Test ResolutionResult invariants."""

    def test_rejects_duplicate_ids(self, item_factory):
        """Test that item ids must be unique."""
        with pytest.raises(ValidationError):
            ResolutionResult(
                query="q",
                candidates=["A", "B"],
                items=[item_factory(1, "A"), item_factory(1, "B")],
            )

    def test_rejects_more_items_than_candidates(self, item_factory):
        """Test that items never outnumber candidates."""
        with pytest.raises(ValidationError):
            ResolutionResult(
                query="q", candidates=["A"], items=[item_factory(1, "A"), item_factory(2, "B")]
            )

    def test_empty(self):
        """Test empty result."""
        assert ResolutionResult(query="q").is_empty


class TestQuizQuestion:
    """Test QuizQuestion."""

    def test_accepts_camel_case_alias(self):
        """Test parsing the model's JSON field names."""
        question = QuizQuestion.model_validate(
            {"question": "Q?", "options": ["A", "B", "C", "D"], "correctAnswer": 2}
        )

        assert question.correct_answer == 2

    def test_accepts_field_name(self):
        """Test construction by field name."""
        assert QuizQuestion(question="Q?", options=["A", "B"], correct_answer=1).correct_answer == 1

    def test_rejects_out_of_range_answer(self):
        """Test answer index validation."""
        with pytest.raises(ValidationError):
            QuizQuestion(question="Q?", options=["A", "B"], correct_answer=2)


def test_pick_trailer_fallbacks():
    """Test trailer selection fallbacks."""
    unofficial = Video(key="a", site="YouTube", type="Trailer")
    vimeo = Video(key="b", site="Vimeo", type="Trailer", official=True)
    teaser = Video(key="c", site="YouTube", type="Teaser", official=True)

    assert pick_trailer([vimeo, teaser, unofficial]) is unofficial
    assert pick_trailer([vimeo, teaser]) is None
    assert pick_trailer([]) is None
    assert vimeo.url == "https://vimeo.com/b"
