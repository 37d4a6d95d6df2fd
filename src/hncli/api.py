"""Typed wrapper around the Hacker News Firebase API.

Provides:
- ``list_story_ids``: ranked identifiers for a sort mode
- ``fetch_story``: detail record for a single identifier

Transport problems surface as TransportError, malformed payloads as
DecodeError. ``fetch_story`` wraps either in a FetchError carrying the id.
"""

from __future__ import annotations

from typing import Any

import httpx
import structlog

from hncli.config import SortMode
from hncli.errors import DecodeError, FetchError, TransportError
from hncli.models import Story, decode_story, decode_story_ids

logger = structlog.get_logger(__name__)


class HackerNewsClient:
    """Single-attempt, blocking access to the list and item resources."""

    def __init__(self, http: httpx.Client, log: structlog.stdlib.BoundLogger | None = None) -> None:
        self.http = http
        self.log = log or logger

    def _url(self, path: str) -> str:
        return str(self.http.base_url.join(path))

    def _get_json(self, path: str) -> Any:
        url = self._url(path)
        try:
            resp = self.http.get(path)
            resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise TransportError(url, f"HTTP {exc.response.status_code}") from exc
        except httpx.HTTPError as exc:
            raise TransportError(url, exc) from exc

        try:
            return resp.json()
        except ValueError as exc:
            raise DecodeError(f"invalid JSON ({exc})", url=url) from exc

    def list_story_ids(self, sort_mode: SortMode) -> list[int]:
        """Return the ranked identifiers for *sort_mode*, in API order."""
        path = f"{sort_mode.endpoint}.json"
        self.log.info("hackernews.listing", sort=str(sort_mode), endpoint=sort_mode.endpoint)
        ids = decode_story_ids(self._get_json(path), url=self._url(path))
        self.log.info("hackernews.listed", sort=str(sort_mode), available=len(ids))
        return ids

    def fetch_story(self, story_id: int) -> Story:
        """Fetch and decode one story. Raises FetchError on any failure."""
        path = f"item/{story_id}.json"
        try:
            return decode_story(self._get_json(path), url=self._url(path))
        except (TransportError, DecodeError) as exc:
            raise FetchError(story_id, exc) from exc
