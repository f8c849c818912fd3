"""Runtime configuration based on environment variables."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AnyHttpUrl, BaseModel, Field, PositiveFloat, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from placesearch.domain.models import Language


class SearchSettings(BaseModel):
    base_url: AnyHttpUrl = Field(
        default="https://place-name.onrender.com",
        description="Root of the place-search API; /api/search is appended.",
    )
    page_size: int = Field(default=10, ge=1, le=100)
    min_query_length: int = Field(default=3, ge=1)
    debounce_ms: int = Field(default=300, ge=0)
    request_timeout_seconds: PositiveFloat | None = Field(
        default=None,
        description="Per-request timeout. None waits for the transport to fail.",
    )
    max_attempts: int = Field(default=1, ge=1, le=5)
    retry_base_delay: float = Field(default=0.3, ge=0)

    @field_validator("request_timeout_seconds", mode="before")
    @classmethod
    def _empty_str_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def api_url(self) -> str:
        return f"{str(self.base_url).rstrip('/')}/api/search"


class SearchClientSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="PLACES_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    environment: Literal["dev", "staging", "prod"] = "dev"
    log_level: str = "INFO"
    default_language: Language = Language.EN

    search: SearchSettings = Field(default_factory=SearchSettings)


@lru_cache
def get_settings() -> SearchClientSettings:
    """Return cached settings instance."""

    return SearchClientSettings()


__all__ = [
    "SearchClientSettings",
    "SearchSettings",
    "get_settings",
]
