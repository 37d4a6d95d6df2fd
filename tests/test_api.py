"""Tests for the Hacker News API wrapper."""

from __future__ import annotations

import json
from unittest.mock import MagicMock

import httpx
import pytest

from hncli.api import HackerNewsClient
from hncli.config import SortMode
from hncli.errors import DecodeError, FetchError, TransportError

BASE_URL = "https://hacker-news.firebaseio.com/v0/"


def _mock_json_response(data: object, status_code: int = 200) -> MagicMock:
    """Create a mock httpx.Response returning JSON data."""
    resp = MagicMock(spec=httpx.Response)
    resp.status_code = status_code
    resp.json.return_value = data
    resp.text = json.dumps(data)
    if status_code >= 400:
        resp.raise_for_status.side_effect = httpx.HTTPStatusError(
            f"status {status_code}",
            request=httpx.Request("GET", BASE_URL),
            response=resp,
        )
    else:
        resp.raise_for_status.return_value = None
    return resp


def _mock_invalid_json_response() -> MagicMock:
    resp = MagicMock(spec=httpx.Response)
    resp.status_code = 200
    resp.raise_for_status.return_value = None
    resp.json.side_effect = json.JSONDecodeError("Expecting value", "<html>", 0)
    return resp


def _make_client(*responses: MagicMock) -> MagicMock:
    """Create a mock httpx.Client returning *responses* in order."""
    client = MagicMock(spec=httpx.Client)
    client.base_url = httpx.URL(BASE_URL)
    client.get.side_effect = list(responses)
    return client


class TestListStoryIds:
    @pytest.mark.parametrize(
        ("mode", "path"),
        [(SortMode.HOTTEST, "topstories.json"), (SortMode.LATEST, "newstories.json")],
    )
    def test_endpoint_per_sort_mode(self, mode, path, log):
        client = _make_client(_mock_json_response([1, 2, 3]))

        ids = HackerNewsClient(client, log).list_story_ids(mode)

        assert ids == [1, 2, 3]
        client.get.assert_called_once_with(path)

    def test_connection_error(self, log):
        client = _make_client()
        client.get.side_effect = httpx.ConnectError("connection refused")

        with pytest.raises(TransportError) as exc_info:
            HackerNewsClient(client, log).list_story_ids(SortMode.HOTTEST)

        assert exc_info.value.url == BASE_URL + "topstories.json"
        assert "connection refused" in str(exc_info.value)

    def test_non_success_status(self, log):
        client = _make_client(_mock_json_response({"error": "down"}, status_code=503))

        with pytest.raises(TransportError, match="HTTP 503"):
            HackerNewsClient(client, log).list_story_ids(SortMode.LATEST)

    def test_payload_not_integer_list(self, log):
        client = _make_client(_mock_json_response({"error": "Permission denied"}))

        with pytest.raises(DecodeError) as exc_info:
            HackerNewsClient(client, log).list_story_ids(SortMode.HOTTEST)

        assert exc_info.value.url == BASE_URL + "topstories.json"

    def test_invalid_json(self, log):
        client = _make_client(_mock_invalid_json_response())

        with pytest.raises(DecodeError, match="invalid JSON"):
            HackerNewsClient(client, log).list_story_ids(SortMode.HOTTEST)


class TestFetchStory:
    def test_success(self, story_payload, log):
        client = _make_client(_mock_json_response(story_payload))

        story = HackerNewsClient(client, log).fetch_story(8863)

        assert story.title == "My YC app: Sample"
        assert story.author == "dhouston"
        client.get.assert_called_once_with("item/8863.json")

    def test_transport_failure_wrapped(self, log):
        client = _make_client()
        client.get.side_effect = httpx.ReadTimeout("timed out")

        with pytest.raises(FetchError) as exc_info:
            HackerNewsClient(client, log).fetch_story(42)

        assert exc_info.value.story_id == 42
        assert isinstance(exc_info.value.cause, TransportError)
        assert str(exc_info.value).startswith("Error fetching story 42:")

    def test_decode_failure_wrapped(self, story_payload, log):
        del story_payload["by"]
        client = _make_client(_mock_json_response(story_payload))

        with pytest.raises(FetchError) as exc_info:
            HackerNewsClient(client, log).fetch_story(8863)

        assert isinstance(exc_info.value.cause, DecodeError)
        assert exc_info.value.cause.url == BASE_URL + "item/8863.json"

    def test_status_failure_wrapped(self, log):
        client = _make_client(_mock_json_response(None, status_code=404))

        with pytest.raises(FetchError) as exc_info:
            HackerNewsClient(client, log).fetch_story(7)

        assert isinstance(exc_info.value.cause, TransportError)
        assert "HTTP 404" in str(exc_info.value)

    def test_null_item_wrapped(self, log):
        client = _make_client(_mock_json_response(None))

        with pytest.raises(FetchError) as exc_info:
            HackerNewsClient(client, log).fetch_story(99999999)

        assert isinstance(exc_info.value.cause, DecodeError)
