"""Internal link schemas."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from safari_index.schemas.topic import TopicBucket


class InternalLink(BaseModel):
    """Ready-to-render link descriptor.

    Serializes as ``{"href", "anchorText", "title"}`` with ``by_alias=True``.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    href: str
    anchor_text: str
    title: str  # For the title attribute


class RelatedDecision(BaseModel):
    """A ranked related topic, before it is mapped to a link."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    topic_id: str
    slug: str
    title: str
    bucket: TopicBucket
    relevance_score: float
    has_baseline: bool
