"""Application configuration using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Upper bound on related-decision links per page, whatever the configuration
RELATED_LINKS_HARD_CAP = 6


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = "INFO"

    # Related decisions (internal linking)
    related_links_max: int = Field(default=6, ge=0, le=RELATED_LINKS_HARD_CAP)
    related_links_min: int = Field(default=3, ge=0)
    related_links_launch_tier: Literal["P0", "P1", "P2"] = "P0"

    # Canonical page prefixes
    decision_path_prefix: str = "/decisions"
    guide_path_prefix: str = "/guides"

    # Decision comparison
    diff_confidence_threshold: float = 0.10
    diff_item_limit: int | None = None

    # Blog editorial limits
    blog_min_word_count: int = 1200
    blog_max_word_count: int = 1800
    blog_max_related_decisions: int = 3
    blog_max_related_trips: int = 2
    blog_max_related_guides: int = 2

    @field_validator("decision_path_prefix", "guide_path_prefix", mode="before")
    @classmethod
    def _normalize_path_prefix(cls, value: object) -> object:
        """Normalize route prefix values to `/segment` form."""
        if not isinstance(value, str):
            return value
        normalized = value.strip()
        if not normalized or normalized == "/":
            return ""
        return f"/{normalized.strip('/')}"

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper() or "INFO"
        return value

    @field_validator("diff_item_limit", mode="before")
    @classmethod
    def _parse_item_limit(cls, value: object) -> object:
        """Treat empty or non-positive limits as "compare everything"."""
        if value is None:
            return None
        if isinstance(value, str):
            raw = value.strip().lower()
            if raw in {"", "none", "null"}:
                return None
            value = int(raw)
        if isinstance(value, int) and value <= 0:
            return None
        return value

    @model_validator(mode="after")
    def _link_minimum_within_maximum(self) -> "Settings":
        if self.related_links_min > self.related_links_max:
            raise ValueError("related_links_min cannot exceed related_links_max.")
        return self


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    settings = Settings()

    return settings


settings = get_settings()
