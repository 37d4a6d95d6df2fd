"""Global settings loaded from environment variables via pydantic-settings."""

from __future__ import annotations

from typing import Literal

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from hncli import __version__
from hncli.errors import ConfigurationError

HN_API_BASE = "https://hacker-news.firebaseio.com/v0"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="HNCLI_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    base_url: str = HN_API_BASE
    timeout: float = 10.0
    proxy_url: str = ""
    user_agent: str = f"hncli/{__version__}"
    # Logging (stderr threshold; file log only when log_dir is set)
    log_level: LogLevel = "WARNING"
    log_dir: str = ""

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


def load_settings(**overrides) -> Settings:
    """Load settings from the environment, raising ConfigurationError on bad values."""
    try:
        return Settings(**overrides)
    except ValidationError as exc:
        problems = "; ".join(f"HNCLI_{'.'.join(str(p) for p in err['loc']).upper()}: {err['msg']}" for err in exc.errors())
        raise ConfigurationError(problems) from exc
