"""Shared test fixtures: sample API payloads and a quiet logger."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest


@pytest.fixture()
def story_payload() -> dict:
    """The canonical item 8863 payload from the Hacker News API docs."""
    return {
        "by": "dhouston",
        "descendants": 71,
        "id": 8863,
        "kids": [8952, 9224],
        "score": 111,
        "time": 1175714200,
        "title": "My YC app: Sample",
        "type": "story",
        "url": "http://www.getdropbox.com/u/2/screencast.html",
    }


@pytest.fixture()
def log() -> MagicMock:
    return MagicMock()
