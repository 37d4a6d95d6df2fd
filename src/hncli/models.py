"""Pydantic schemas for Hacker News API payloads.

- Story: decoded detail record from /item/{id}.json
- StoryIds: ranked identifier list from /topstories.json or /newstories.json
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from hncli.errors import DecodeError

StoryId = Annotated[int, Field(strict=True, ge=0)]

_story_ids_adapter = TypeAdapter(list[StoryId])


class Story(BaseModel):
    """One story. ``title``, ``score`` and ``by`` are required; ``url`` is optional."""

    model_config = ConfigDict(frozen=True, strict=True, populate_by_name=True, extra="ignore")

    title: str
    url: str | None = None
    score: int
    author: str = Field(alias="by")


def _describe(exc: ValidationError) -> str:
    return "; ".join(f"{'.'.join(str(p) for p in err['loc']) or 'payload'}: {err['msg']}" for err in exc.errors())


def decode_story(payload: Any, url: str | None = None) -> Story:
    """Validate a detail payload into a Story or raise DecodeError."""
    if not isinstance(payload, dict):
        # The API answers `null` for ids it does not know
        raise DecodeError(f"expected an object, got {type(payload).__name__}", url=url)
    try:
        return Story.model_validate(payload)
    except ValidationError as exc:
        raise DecodeError(_describe(exc), url=url) from exc


def decode_story_ids(payload: Any, url: str | None = None) -> list[int]:
    """Validate a list payload into identifiers, preserving order and duplicates."""
    try:
        return _story_ids_adapter.validate_python(payload)
    except ValidationError as exc:
        raise DecodeError(_describe(exc), url=url) from exc
