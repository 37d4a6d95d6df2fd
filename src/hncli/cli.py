"""Click entry point: list, collect, and print Hacker News stories."""

from __future__ import annotations

import click
import structlog

from hncli import __version__
from hncli.api import HackerNewsClient
from hncli.config import DEFAULT_COUNT, RunConfig, SortMode, build_config
from hncli.errors import ConfigurationError, DecodeError, TransportError
from hncli.http import create_http_client
from hncli.logging import setup_logging
from hncli.models import Story
from hncli.pipeline import collect_stories
from hncli.progress import story_progress
from hncli.render import render_done, render_header, render_stories
from hncli.settings import Settings, load_settings


def run(config: RunConfig, settings: Settings, log: structlog.stdlib.BoundLogger) -> list[Story]:
    """List ids, collect the bounded slice, and return the stories that fetched.

    A listing failure is fatal and raised as a ClickException before any
    story is fetched.
    """
    with create_http_client(
        base_url=settings.base_url,
        user_agent=settings.user_agent,
        proxy_url=settings.proxy_url or None,
        timeout=settings.timeout,
    ) as http:
        api = HackerNewsClient(http, log)

        try:
            ids = api.list_story_ids(config.sort)
        except (TransportError, DecodeError) as exc:
            raise click.ClickException(f"could not list {config.sort} stories: {exc}") from exc

        limit = min(config.count, len(ids))
        log.info("run.collecting", sort=str(config.sort), requested=config.count, limit=limit)
        with story_progress(limit) as advance:
            return collect_stories(ids, config.count, api.fetch_story, on_progress=advance, log=log)


@click.command()
@click.option(
    "-s",
    "--sort",
    type=click.Choice([mode.value for mode in SortMode], case_sensitive=False),
    default=SortMode.HOTTEST.value,
    show_default=True,
    help="'latest' for new stories, 'hottest' for top stories.",
)
@click.option(
    "-c",
    "--count",
    "-t",
    "--top",
    "count",
    type=int,
    default=DEFAULT_COUNT,
    show_default=True,
    help="Number of results to return.",
)
@click.option("-v", "--verbose", is_flag=True, help="Log progress events to stderr.")
@click.version_option(__version__, prog_name="hncli")
def cli(sort: str, count: int, verbose: bool) -> None:
    """A stylish Hacker News CLI fetcher."""
    try:
        config = build_config(sort=sort.lower(), count=count)
        settings = load_settings()
        log = setup_logging("INFO" if verbose else settings.log_level, settings.log_dir)
    except ConfigurationError as exc:
        raise click.UsageError(str(exc)) from exc
    except OSError as exc:
        raise click.UsageError(f"cannot write logs to {settings.log_dir}: {exc}") from exc

    render_header()
    stories = run(config, settings, log)
    render_stories(stories)
    render_done()
    log.info("run.complete", shown=len(stories))
