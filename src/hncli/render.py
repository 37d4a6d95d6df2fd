"""Terminal rendering of collected stories."""

from __future__ import annotations

from collections.abc import Sequence

import click

from hncli.models import Story

HEADER = " 🧡 Hacker News CLI "


def format_story(position: int, story: Story) -> list[str]:
    """Styled lines for one story block, *position* being 1-based."""
    index = click.style(f"{position:>2}.", dim=True)
    score = click.style(f"[{story.score:^4}]", fg="yellow", bold=True)
    title = click.style(story.title, fg="white", bold=True)

    lines = [f"{index} {score} {title}"]
    if story.url:
        link = click.style(story.url, fg="cyan", underline=True)
        lines.append(f"      {click.style('🔗', dim=True)} {link}")
    lines.append("      " + click.style(f"by {story.author}", fg="bright_black"))
    lines.append("")
    return lines


def render_header() -> None:
    click.echo()
    click.echo(click.style(HEADER, bg="cyan", fg="black", bold=True))


def render_stories(stories: Sequence[Story]) -> None:
    """Write a numbered listing to stdout; numbering follows the sequence given."""
    for position, story in enumerate(stories, start=1):
        for line in format_story(position, story):
            click.echo(line)


def render_done() -> None:
    click.echo(click.style("Done!", fg="green", bold=True))
