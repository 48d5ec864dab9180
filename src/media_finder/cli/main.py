"""Main CLI entry point."""

import asyncio
import sys
from pathlib import Path
from typing import Awaitable, Callable, List, Optional

import click

from .. import __version__
from ..config import ConfigManager
from ..core.interfaces import (
    ICompletionService,
    IMediaAssistant,
    IMediaResolver,
    IMetadataService,
)
from ..core.models import (
    ChatMessage,
    MediaDetails,
    MediaItem,
    MediaKind,
    SearchStatus,
    pick_trailer,
)
from ..core.services import SearchSession
from ..core.services.tmdb_service import LISTINGS
from ..infrastructure import Container, setup_logging
from ..utils import ConfigurationError, MediaFinderError, truncate_text

KIND_CHOICE = click.Choice([kind.value for kind in MediaKind])
LISTING_CHOICE = click.Choice(
    sorted({name for names in LISTINGS.values() for name in names} | {"trending"})
)


@click.group()
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to configuration file",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.version_option(version=__version__, prog_name="media-finder")
@click.pass_context
def cli(ctx: click.Context, config: Optional[Path], verbose: bool) -> None:
    """Media Finder - discover movies and TV shows with TMDb and an LLM."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["config_path"] = config

    if ctx.invoked_subcommand == "init":
        return

    try:
        config_manager = ConfigManager(config)
        app_config = config_manager.load_config()

        if verbose:
            app_config.logging.level = "DEBUG"
        setup_logging(app_config.logging)

        container = Container(config_manager)
        container.configure_default_services()

        ctx.obj["config"] = app_config
        ctx.obj["container"] = container

    except (ConfigurationError, FileNotFoundError, ValueError) as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.argument("description")
@click.pass_context
def find(ctx: click.Context, description: str) -> None:
    """Find titles matching a free-text DESCRIPTION."""
    container = ctx.obj["container"]

    async def run() -> Optional[int]:
        session = SearchSession(container.get(IMediaResolver))
        view = await session.submit(description)
        if view is None:
            return None

        if view.status != SearchStatus.RESULTS:
            click.echo(view.message, err=True)
            return 1

        click.echo(f"AI found {len(view.items)} title(s) for: {view.query}")
        _echo_items(view.items)
        return None

    _run(container, run)


@cli.command()
@click.argument("query")
@click.option("--kind", type=click.Choice(["multi", "movie", "tv"]), default="multi")
@click.option("--page", type=int, default=1, show_default=True)
@click.pass_context
def search(ctx: click.Context, query: str, kind: str, page: int) -> None:
    """Search titles by name."""
    container = ctx.obj["container"]

    async def run() -> None:
        metadata = container.get(IMetadataService)
        if kind == "movie":
            result = await metadata.search_movies(query, page)
        elif kind == "tv":
            result = await metadata.search_tv(query, page)
        else:
            result = await metadata.search_multi(query, page)

        click.echo(f"Page {result.page} of {result.total_pages} ({result.total_results} total)")
        _echo_items(result.results)

    _run(container, run)


@cli.command()
@click.argument("listing", type=LISTING_CHOICE)
@click.option("--kind", type=KIND_CHOICE, default="movie", show_default=True)
@click.option("--page", type=int, default=1, show_default=True)
@click.option("--window", type=click.Choice(["day", "week"]), default="week", show_default=True)
@click.pass_context
def browse(ctx: click.Context, listing: str, kind: str, page: int, window: str) -> None:
    """Browse a catalog LISTING (popular, top_rated, trending, ...)."""
    container = ctx.obj["container"]
    media_kind = MediaKind(kind)

    if listing != "trending" and listing not in LISTINGS[media_kind]:
        raise click.BadParameter(
            f"'{listing}' is not available for {kind}, "
            f"choose from: trending, {', '.join(sorted(LISTINGS[media_kind]))}",
            param_hint="'LISTING'",
        )

    async def run() -> None:
        metadata = container.get(IMetadataService)
        if listing == "trending":
            result = await metadata.get_trending(media_kind, window, page)
        else:
            result = await metadata.get_listing(listing, media_kind, page)
        _echo_items(result.results)

    _run(container, run)


@cli.command()
@click.argument("media_id", type=int)
@click.option("--kind", type=KIND_CHOICE, default="movie", show_default=True)
@click.pass_context
def details(ctx: click.Context, media_id: int, kind: str) -> None:
    """Show details, credits and trailer for a title."""
    container = ctx.obj["container"]

    async def run() -> None:
        metadata = container.get(IMetadataService)
        media_kind = MediaKind(kind)

        info = await _require_details(container, media_id, media_kind)
        credits, videos = await asyncio.gather(
            metadata.get_credits(media_id, media_kind),
            metadata.get_videos(media_id, media_kind),
        )

        click.echo(f"{info.title} ({info.year or 'Unknown'})")
        if info.tagline:
            click.echo(f"  {info.tagline}")
        click.echo(f"  Rating: {info.rating:.1f}/10 ({info.vote_count} votes)")
        if info.genres:
            click.echo(f"  Genres: {', '.join(info.genre_names)}")
        if info.runtime:
            click.echo(f"  Runtime: {info.runtime // 60}h {info.runtime % 60}m")
        if info.number_of_seasons:
            click.echo(
                f"  Seasons: {info.number_of_seasons} ({info.number_of_episodes} episodes)"
            )
        if credits.directors:
            click.echo(f"  Directed by: {', '.join(d.name for d in credits.directors)}")
        if info.created_by:
            click.echo(f"  Created by: {', '.join(p.name for p in info.created_by)}")
        cast = credits.top_cast(5)
        if cast:
            click.echo(f"  Starring: {', '.join(member.name for member in cast)}")
        trailer = pick_trailer(videos)
        if trailer and trailer.url:
            click.echo(f"  Trailer: {trailer.url}")
        poster = metadata.image_url(info.poster_path)
        if poster:
            click.echo(f"  Poster: {poster}")
        if info.overview:
            click.echo(f"\n{info.overview}")

    _run(container, run)


@cli.command()
@click.argument("media_id", type=int)
@click.option("--kind", type=KIND_CHOICE, default="movie", show_default=True)
@click.option("--themes", is_flag=True, help="Analyze themes instead of summarizing")
@click.pass_context
def summarize(ctx: click.Context, media_id: int, kind: str, themes: bool) -> None:
    """Write an AI summary (or theme analysis) of a title."""
    container = ctx.obj["container"]

    async def run() -> None:
        info = await _require_details(container, media_id, MediaKind(kind))
        assistant = container.get(IMediaAssistant)
        if themes:
            text = await assistant.analyze_themes(info.title, info.overview)
        else:
            text = await assistant.summarize(info.title, info.overview)
        click.echo(text)

    _run(container, run)


@cli.command()
@click.argument("media_id", type=int)
@click.option("--kind", type=KIND_CHOICE, default="movie", show_default=True)
@click.pass_context
def chat(ctx: click.Context, media_id: int, kind: str) -> None:
    """Chat with the assistant about a title (empty line to quit)."""
    container = ctx.obj["container"]

    async def run() -> None:
        info = await _require_details(container, media_id, MediaKind(kind))
        assistant = container.get(IMediaAssistant)
        history: List[ChatMessage] = []

        click.echo(f"Ask anything about {info.title}.")
        while True:
            question = click.prompt("You", default="", show_default=False).strip()
            if not question:
                break
            answer = await assistant.chat(info.title, info.overview, question, history)
            click.echo(f"Assistant: {answer}")
            history.append(ChatMessage(role="user", text=question))
            history.append(ChatMessage(role="assistant", text=answer))

    _run(container, run)


@cli.command()
@click.pass_context
def validate(ctx: click.Context) -> None:
    """Validate configuration (no network requests are made)."""
    container = ctx.obj["container"]
    errors = []

    if not container.get(IMetadataService).is_configured():
        errors.append("TMDb API key not configured")
    if not container.get(ICompletionService).is_configured():
        errors.append("LLM API key not configured")

    if errors:
        for error in errors:
            click.echo(f"✗ {error}", err=True)
        sys.exit(1)

    click.echo("Configuration validated successfully")


@cli.command()
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path),
    default=Path.cwd() / "config" / "config.yaml",
    help="Output path for configuration file",
)
def init(output: Path) -> None:
    """Initialize configuration file."""
    try:
        if output.exists():
            if not click.confirm(f"Configuration file {output} already exists. Overwrite?"):
                return

        output.parent.mkdir(parents=True, exist_ok=True)

        ConfigManager.create_default_config(output)
        click.echo(f"Configuration file created at: {output}")
        click.echo("Set TMDB_API_KEY and LLM_API_KEY in your environment or .env file.")

    except OSError as e:
        click.echo(f"Failed to create configuration: {e}", err=True)
        sys.exit(1)


async def _require_details(
    container: Container, media_id: int, kind: MediaKind
) -> MediaDetails:
    info = await container.get(IMetadataService).get_details(media_id, kind)
    if info is None:
        raise MediaFinderError(f"No {kind.value} found with ID {media_id}")
    return info


def _echo_items(items: List[MediaItem]) -> None:
    if not items:
        click.echo("No results.")
        return

    for i, item in enumerate(items, 1):
        label = "Movie" if item.is_movie else "TV"
        click.echo(f"\n  {i}. {item.title} ({item.year or 'N/A'}) [{label}]")
        click.echo(f"     TMDb ID: {item.id} | Rating: {item.rating:.1f}")
        if item.overview:
            click.echo(f"     {truncate_text(item.overview, 100)}")


def _run(container: Container, func: Callable[[], Awaitable[Optional[int]]]) -> None:
    """Run an async command and close the container's sessions afterwards."""

    async def wrapper() -> Optional[int]:
        async with container:
            return await func()

    try:
        exit_code = asyncio.run(wrapper())
    except KeyboardInterrupt:
        click.echo("\nOperation cancelled by user.")
        sys.exit(1)
    except MediaFinderError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if exit_code:
        sys.exit(exit_code)


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
