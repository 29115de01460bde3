"""Decision-anchored blog schemas.

Every blog extends a decision page. It lives at ``/blog/decisions/{slug}`` and
follows the editorial template of six sections plus related links.
"""

from datetime import date
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RelatedLink(BaseModel):
    model_config = ConfigDict(frozen=True)

    slug: str
    title: str
    type: Literal["decision", "trip", "guide", "activity"]


class BlogContent(BaseModel):
    """Blog content structure matching the editorial template."""

    model_config = ConfigDict(frozen=True)

    decision_slug: str  # Must match a valid decision slug
    title: str  # H1, exact question from the decision
    subtitle: str = ""
    updated_at: date | None = None
    word_count: int = 0

    why_not_simple: str = ""
    variables: str = ""
    tradeoffs: str = ""
    misconceptions: str = ""
    breaks_down: str = ""
    our_approach: str = ""

    related_decisions: list[RelatedLink] = Field(default_factory=list)
    related_trips: list[RelatedLink] = Field(default_factory=list)
    related_guides: list[RelatedLink] = Field(default_factory=list)

    published: bool = False

    @field_validator(
        "why_not_simple",
        "variables",
        "tradeoffs",
        "misconceptions",
        "breaks_down",
        "our_approach",
        mode="before",
    )
    @classmethod
    def _coerce_missing_sections(cls, value: object) -> object:
        return "" if value is None else value

    @field_validator("related_decisions", "related_trips", "related_guides", mode="before")
    @classmethod
    def _coerce_missing_links(cls, value: object) -> object:
        return [] if value is None else value


class BlogRegistration(BaseModel):
    """Outcome of registering a blog: the problems found, returned as data."""

    model_config = ConfigDict(frozen=True)

    decision_slug: str
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors
