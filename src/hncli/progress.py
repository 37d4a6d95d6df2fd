"""Transient progress bar for the collection phase, drawn on stderr."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager

from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TimeElapsedColumn,
    TimeRemainingColumn,
)


@contextmanager
def story_progress(total: int, console: Console | None = None) -> Iterator[Callable[[], None]]:
    """Yield a callback that advances the bar by one story.

    The bar is removed once the block exits. Nothing is drawn when stderr is
    not a terminal.
    """
    console = console or Console(stderr=True)
    progress = Progress(
        SpinnerColumn(style="green"),
        TimeElapsedColumn(),
        BarColumn(bar_width=40, style="blue", complete_style="cyan", finished_style="cyan"),
        MofNCompleteColumn(),
        TimeRemainingColumn(),
        console=console,
        transient=True,
        disable=not console.is_terminal,
    )
    with progress:
        task = progress.add_task("stories", total=total)
        yield lambda: progress.advance(task)
