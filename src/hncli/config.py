"""Run configuration: sort mode and story count."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from hncli.errors import ConfigurationError

DEFAULT_COUNT = 30


class SortMode(StrEnum):
    """Which ranked story list to draw from."""
    LATEST = "latest"
    HOTTEST = "hottest"

    @property
    def endpoint(self) -> str:
        """Remote list resource name for this mode."""
        return _ENDPOINTS[self]


_ENDPOINTS = {
    SortMode.HOTTEST: "topstories",
    SortMode.LATEST: "newstories",
}


class RunConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    sort: SortMode = SortMode.HOTTEST
    count: int = DEFAULT_COUNT

    @field_validator("count")
    @classmethod
    def _non_negative(cls, value: int) -> int:
        if value < 0:
            raise ValueError("count must be a non-negative integer")
        return value


def build_config(sort: str | SortMode | None = None, count: int | None = None) -> RunConfig:
    """Build a RunConfig, falling back to defaults for unset values.

    Raises ConfigurationError for a negative count or an unknown sort mode.
    """
    values: dict = {}
    if sort is not None:
        values["sort"] = sort
    if count is not None:
        values["count"] = count

    try:
        return RunConfig(**values)
    except ValidationError as exc:
        problems = "; ".join(f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors())
        raise ConfigurationError(problems) from exc
