"""Topic schemas."""

from typing import Literal

from pydantic import BaseModel, ConfigDict

TopicBucket = Literal[
    "personal_fit",
    "destination_choice",
    "timing",
    "experience_type",
    "accommodation",
    "logistics",
    "risk_ethics",
    "value_cost",
]
SeoIntent = Literal["low", "medium", "high"]
LaunchPriority = Literal["P0", "P1", "P2"]


class Topic(BaseModel):
    """A single travel-planning question the site can answer.

    Loaded once from static content and never mutated at runtime.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    bucket: TopicBucket
    title: str  # Question form, used as anchor text
    assurance_eligible: bool = False
    seo_intent: SeoIntent = "medium"
    launch_priority: LaunchPriority = "P1"

    @property
    def bucket_slug(self) -> str:
        return bucket_to_slug(self.bucket)


def bucket_to_slug(bucket: str) -> str:
    """Convert a bucket key (``value_cost``) into its slug/tag form (``value-cost``)."""
    return bucket.replace("_", "-")
