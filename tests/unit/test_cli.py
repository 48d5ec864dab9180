"""Test command line interface."""

from unittest.mock import AsyncMock, patch

import pytest
from click.testing import CliRunner

from media_finder.cli import cli
from media_finder.core.models import (
    Credits,
    CrewMember,
    MediaDetails,
    MediaKind,
    ResolutionResult,
    SearchStatus,
    Video,
)
from media_finder.core.services import MediaAssistant, MediaResolver, TMDbService
from media_finder.core.services.search_session import MESSAGES
from media_finder.utils import ConfigurationError


@pytest.fixture
def runner():
    """Create a CLI runner."""
    return CliRunner()


def test_init_creates_config(runner, tmp_path):
    """Test that init writes a loadable configuration file."""
    output = tmp_path / "config" / "config.yaml"

    result = runner.invoke(cli, ["init", "--output", str(output)])

    assert result.exit_code == 0
    assert output.exists()
    assert "TMDB_API_KEY" in output.read_text()


def test_validate_configured(runner, temp_config_file):
    """Test validation with both keys present."""
    result = runner.invoke(cli, ["--config", str(temp_config_file), "validate"])

    assert result.exit_code == 0
    assert "validated successfully" in result.output


def test_validate_reports_missing_keys(runner, unconfigured_config_file):
    """Test that validation lists every missing key."""
    result = runner.invoke(cli, ["--config", str(unconfigured_config_file), "validate"])

    assert result.exit_code == 1
    assert "TMDb API key not configured" in result.output
    assert "LLM API key not configured" in result.output


def test_find_prints_results(runner, temp_config_file, item_factory):
    """Test natural-language search output."""
    result_model = ResolutionResult(
        query="dream heist",
        candidates=["Inception", "Breaking Bad"],
        items=[
            item_factory(27205, "Inception", rating=8.4),
            item_factory(1396, "Breaking Bad", kind=MediaKind.TV, release_date="2008-01-20"),
        ],
    )

    with patch.object(
        MediaResolver, "resolve_by_description", new=AsyncMock(return_value=result_model)
    ):
        result = runner.invoke(cli, ["--config", str(temp_config_file), "find", "dream heist"])

    assert result.exit_code == 0
    assert "AI found 2 title(s)" in result.output
    assert "Inception (2010) [Movie]" in result.output
    assert "Breaking Bad (2008) [TV]" in result.output


def test_find_no_matches(runner, temp_config_file):
    """Test the no-match message."""
    empty = ResolutionResult(query="x", candidates=["A"], items=[])

    with patch.object(MediaResolver, "resolve_by_description", new=AsyncMock(return_value=empty)):
        result = runner.invoke(cli, ["--config", str(temp_config_file), "find", "x"])

    assert result.exit_code == 1
    assert MESSAGES[SearchStatus.NO_MATCHES] in result.output


def test_find_without_keys(runner, unconfigured_config_file):
    """Test that missing keys produce the configuration message."""
    with patch.object(
        MediaResolver,
        "resolve_by_description",
        new=AsyncMock(side_effect=ConfigurationError("no key")),
    ):
        result = runner.invoke(cli, ["--config", str(unconfigured_config_file), "find", "x"])

    assert result.exit_code == 1
    assert MESSAGES[SearchStatus.CONFIGURATION_ERROR] in result.output


def test_details(runner, temp_config_file):
    """Test the details view."""
    info = MediaDetails(
        id=27205,
        title="Inception",
        kind=MediaKind.MOVIE,
        rating=8.4,
        vote_count=35000,
        release_date="2010-07-15",
        overview="A thief who steals corporate secrets.",
        poster_path="/inception.jpg",
        runtime=148,
    )
    credits = Credits(crew=[CrewMember(id=525, name="Christopher Nolan", job="Director")])
    videos = [Video(key="YoHD9XEInc0", site="YouTube", type="Trailer", official=True)]

    with patch.object(TMDbService, "get_details", new=AsyncMock(return_value=info)), patch.object(
        TMDbService, "get_credits", new=AsyncMock(return_value=credits)
    ), patch.object(TMDbService, "get_videos", new=AsyncMock(return_value=videos)):
        result = runner.invoke(cli, ["--config", str(temp_config_file), "details", "27205"])

    assert result.exit_code == 0
    assert "Inception (2010)" in result.output
    assert "Runtime: 2h 28m" in result.output
    assert "Directed by: Christopher Nolan" in result.output
    assert "https://www.youtube.com/watch?v=YoHD9XEInc0" in result.output
    assert "https://image.tmdb.org/t/p/w500/inception.jpg" in result.output


def test_details_not_found(runner, temp_config_file):
    """Test a missing title."""
    with patch.object(TMDbService, "get_details", new=AsyncMock(return_value=None)):
        result = runner.invoke(
            cli, ["--config", str(temp_config_file), "details", "1", "--kind", "tv"]
        )

    assert result.exit_code == 1
    assert "No tv found with ID 1" in result.output


def test_summarize_themes(runner, temp_config_file):
    """Test theme analysis through the CLI."""
    info = MediaDetails(id=1, title="Inception", kind=MediaKind.MOVIE, overview="Dreams.")

    with patch.object(TMDbService, "get_details", new=AsyncMock(return_value=info)), patch.object(
        MediaAssistant, "analyze_themes", new=AsyncMock(return_value="Memory and guilt.")
    ) as analyze:
        result = runner.invoke(
            cli, ["--config", str(temp_config_file), "summarize", "1", "--themes"]
        )

    assert result.exit_code == 0
    assert "Memory and guilt." in result.output
    analyze.assert_awaited_once_with("Inception", "Dreams.")


def test_browse_rejects_listing_for_wrong_kind(runner, temp_config_file):
    """Test that a movie-only listing is a usage error for TV."""
    with patch.object(TMDbService, "get_listing", new=AsyncMock()) as get_listing:
        result = runner.invoke(
            cli, ["--config", str(temp_config_file), "browse", "now_playing", "--kind", "tv"]
        )

    assert result.exit_code == 2
    assert "not available for tv" in result.output
    get_listing.assert_not_called()


def test_browse_trending_passes_page(runner, temp_config_file, item_factory, page_factory):
    """Test that trending honors --page and --window."""
    page = page_factory(item_factory(1396, "Breaking Bad", kind=MediaKind.TV))

    with patch.object(TMDbService, "get_trending", new=AsyncMock(return_value=page)) as trending:
        result = runner.invoke(
            cli,
            [
                "--config",
                str(temp_config_file),
                "browse",
                "trending",
                "--kind",
                "tv",
                "--window",
                "day",
                "--page",
                "2",
            ],
        )

    assert result.exit_code == 0
    assert "Breaking Bad" in result.output
    trending.assert_awaited_once_with(MediaKind.TV, "day", 2)
