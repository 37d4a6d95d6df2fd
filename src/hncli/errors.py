"""Error taxonomy for listing and fetching stories."""

from __future__ import annotations


class HncliError(Exception):
    """Base class for all hncli errors."""


class TransportError(HncliError):
    """The remote API could not be reached or answered with a non-success status."""

    def __init__(self, url: str, cause: Exception | str) -> None:
        self.url = url
        self.cause = cause
        super().__init__(f"request to {url} failed: {cause}")


class DecodeError(HncliError):
    """A payload did not match the expected shape."""

    def __init__(self, detail: str, url: str | None = None) -> None:
        self.detail = detail
        self.url = url
        message = f"unexpected payload from {url}: {detail}" if url else f"unexpected payload: {detail}"
        super().__init__(message)


class FetchError(HncliError):
    """A single story could not be fetched. Wraps a TransportError or DecodeError."""

    stage = "fetch"

    def __init__(self, story_id: int, cause: TransportError | DecodeError) -> None:
        self.story_id = story_id
        self.cause = cause
        super().__init__(f"Error fetching story {story_id}: {cause}")


class ConfigurationError(HncliError, ValueError):
    """Invalid run configuration, rejected before any network activity."""
