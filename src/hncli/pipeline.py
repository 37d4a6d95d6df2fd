"""Bounded sequential collection of stories."""

from __future__ import annotations

from collections.abc import Callable, Sequence

import structlog

from hncli.errors import ConfigurationError, FetchError
from hncli.models import Story

logger = structlog.get_logger(__name__)


def bounded_slice(ids: Sequence[int], requested_count: int) -> list[int]:
    """First ``min(requested_count, len(ids))`` ids, in original order."""
    if requested_count < 0:
        raise ConfigurationError(f"count must be a non-negative integer, got {requested_count}")
    return list(ids[:requested_count])


def collect_stories(
    ids: Sequence[int],
    requested_count: int,
    fetch: Callable[[int], Story],
    on_progress: Callable[[], None] | None = None,
    log: structlog.stdlib.BoundLogger | None = None,
) -> list[Story]:
    """Fetch stories one at a time, skipping failures.

    Attempts each id of the bounded slice exactly once, in order. Successful
    stories are appended in that same order; a FetchError is logged and the
    id skipped. ``on_progress`` fires once after every attempt.
    """
    log = log or logger
    targets = bounded_slice(ids, requested_count)
    stories: list[Story] = []
    failed = 0

    for story_id in targets:
        try:
            stories.append(fetch(story_id))
        except FetchError as exc:
            failed += 1
            log.error("pipeline.fetch_failed", story_id=story_id, error=str(exc.cause))
        if on_progress is not None:
            on_progress()

    log.info("pipeline.collected", attempted=len(targets), fetched=len(stories), failed=failed)
    return stories
