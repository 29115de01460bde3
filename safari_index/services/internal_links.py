"""Deterministic internal linking between decision topics.

Linking rules:
- Same-bucket topics are related
- Shared tags increase relevance
- Assurance-eligible, baseline-backed and high-intent targets are preferred
- At most ``max_links`` related links per page, never more than six
- Anchor text is the target's question-form title, never "click here"
"""

from __future__ import annotations

import logging
from collections.abc import Container, Mapping
from dataclasses import dataclass

from safari_index.config import RELATED_LINKS_HARD_CAP, Settings, get_settings
from safari_index.content.buckets import DEFAULT_BUCKET_RELATIONSHIPS
from safari_index.content.slugs import SLUG_OVERRIDES, generate_slug_from_id
from safari_index.content.tag_patterns import DEFAULT_TAG_PATTERNS, TagPatternTable
from safari_index.schemas.links import InternalLink, RelatedDecision
from safari_index.services.relevance import (
    DEFAULT_RELEVANCE_WEIGHTS,
    RelevanceWeights,
    score_candidate,
)
from safari_index.services.tagging import extract_topic_tags
from safari_index.services.topic_catalog import TopicCatalog

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LinkingPolicy:
    """Link-count and routing policy for related decisions."""

    max_links: int = 6
    min_links: int = 3
    launch_tier: str = "P0"
    decision_path_prefix: str = "/decisions"
    guide_path_prefix: str = "/guides"

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> LinkingPolicy:
        settings = settings or get_settings()
        return cls(
            max_links=settings.related_links_max,
            min_links=settings.related_links_min,
            launch_tier=settings.related_links_launch_tier,
            decision_path_prefix=settings.decision_path_prefix,
            guide_path_prefix=settings.guide_path_prefix,
        )

    def __post_init__(self) -> None:
        if not 0 <= self.max_links <= RELATED_LINKS_HARD_CAP:
            raise ValueError(
                f"max_links must be between 0 and {RELATED_LINKS_HARD_CAP}, got {self.max_links}."
            )
        if not 0 <= self.min_links <= self.max_links:
            raise ValueError("min_links must be between 0 and max_links.")


class InternalLinkService:
    """Rank and render related-decision links over a loaded topic catalog."""

    def __init__(
        self,
        catalog: TopicCatalog,
        baseline_topic_ids: Container[str] = frozenset(),
        *,
        policy: LinkingPolicy | None = None,
        patterns: TagPatternTable = DEFAULT_TAG_PATTERNS,
        weights: RelevanceWeights = DEFAULT_RELEVANCE_WEIGHTS,
        slug_overrides: Mapping[str, str] = SLUG_OVERRIDES,
        bucket_relationships: Mapping[str, tuple[str, ...]] = DEFAULT_BUCKET_RELATIONSHIPS,
    ) -> None:
        """Initialize the link service.

        Args:
            catalog: Topics in catalog order
            baseline_topic_ids: Presence map of topics with a baseline decision
            policy: Link-count and routing policy (defaults from settings)
            patterns: Tag derivation table
            weights: Relevance scoring weights
            slug_overrides: Topic id -> canonical slug table
            bucket_relationships: Bucket -> cross-linked buckets table
        """
        self.catalog = catalog
        self.baseline_topic_ids = baseline_topic_ids
        self.policy = policy or LinkingPolicy.from_settings()
        self.patterns = patterns
        self.weights = weights
        self.slug_overrides = slug_overrides
        self.bucket_relationships = bucket_relationships

    def rank_related_decisions(
        self,
        topic_id: str,
        limit: int | None = None,
    ) -> list[RelatedDecision]:
        """Return related decisions for a topic, best first.

        Rules:
        - Excludes the source topic itself
        - Only includes topics at the top launch tier
        - Sorted by relevance score, ties keep catalog order
        - Capped at ``policy.max_links``
        """
        source = self.catalog.get(topic_id)
        if source is None:
            logger.debug("Unknown source topic for related decisions", extra={"topic_id": topic_id})
            return []

        actual_limit = self._resolve_limit(limit)
        if actual_limit <= 0:
            return []

        source_tags = extract_topic_tags(source, self.patterns)
        candidates = [
            topic
            for topic in self.catalog.in_tier(self.policy.launch_tier)
            if topic.id != topic_id
        ]

        scored: list[RelatedDecision] = []
        for topic in candidates:
            relevance = score_candidate(
                source,
                topic,
                baseline_topic_ids=self.baseline_topic_ids,
                patterns=self.patterns,
                weights=self.weights,
                source_tags=source_tags,
            )
            scored.append(
                RelatedDecision(
                    topic_id=topic.id,
                    slug=self.slug_for(topic.id),
                    title=topic.title,
                    bucket=topic.bucket,
                    relevance_score=relevance.score,
                    has_baseline=topic.id in self.baseline_topic_ids,
                )
            )

        # sorted() is stable with reverse=True, so equal scores keep catalog order
        ranked = sorted(scored, key=lambda item: item.relevance_score, reverse=True)[:actual_limit]

        logger.debug(
            "Related decisions ranked",
            extra={
                "topic_id": topic_id,
                "candidates": len(candidates),
                "returned": len(ranked),
            },
        )
        return ranked

    def get_related_decisions(self, topic_id: str, limit: int | None = None) -> list[InternalLink]:
        """Return ready-to-render links to the most relevant decisions."""
        return [
            self._decision_link(item.topic_id, item.title)
            for item in self.rank_related_decisions(topic_id, limit)
        ]

    def get_related_decisions_with_minimum(
        self,
        topic_id: str,
        minimum: int | None = None,
        maximum: int | None = None,
    ) -> list[InternalLink]:
        """Related decisions with a soft minimum.

        Falling short of ``minimum`` is reported but never padded with
        unrelated topics: under-linking beats spurious links.
        """
        minimum = self.policy.min_links if minimum is None else minimum
        related = self.get_related_decisions(topic_id, maximum)

        if len(related) < minimum and topic_id in self.catalog:
            logger.warning(
                "Fewer related decisions than the soft minimum",
                extra={"topic_id": topic_id, "found": len(related), "minimum": minimum},
            )
        return related

    def slug_for(self, topic_id: str) -> str:
        return generate_slug_from_id(topic_id, self.slug_overrides)

    def generate_decision_link(self, topic_id: str) -> InternalLink | None:
        """Link to a topic's decision page."""
        topic = self.catalog.get(topic_id)
        if topic is None:
            return None
        return self._decision_link(topic.id, topic.title)

    def get_canonical_decision_link(self, topic_id: str) -> InternalLink | None:
        """Primary CTA from guides to decisions."""
        return self.generate_decision_link(topic_id)

    def generate_guide_link(self, topic_id: str) -> InternalLink | None:
        """Link to a topic's guide page; guides exist only for the top launch tier."""
        topic = self.catalog.get(topic_id)
        if topic is None or topic.launch_priority != self.policy.launch_tier:
            return None

        slug = self.slug_for(topic.id)
        return InternalLink(
            href=f"{self.policy.guide_path_prefix}/{topic.bucket_slug}/{slug}",
            anchor_text=topic.title,
            title=f"Read our guide: {topic.title}",
        )

    def get_bucket_topic_links(self, bucket: str) -> list[InternalLink]:
        """Decision links for every top-tier topic in a bucket, in catalog order."""
        return [
            self._decision_link(topic.id, topic.title)
            for topic in self.catalog.in_bucket(bucket, launch_priority=self.policy.launch_tier)
        ]

    def get_related_buckets(self, bucket: str) -> tuple[str, ...]:
        """Buckets worth cross-linking from a bucket hub."""
        return tuple(self.bucket_relationships.get(bucket, ()))

    def _resolve_limit(self, limit: int | None) -> int:
        if limit is None:
            return self.policy.max_links
        return min(limit, self.policy.max_links)

    def _decision_link(self, topic_id: str, title: str) -> InternalLink:
        return InternalLink(
            href=f"{self.policy.decision_path_prefix}/{self.slug_for(topic_id)}",
            anchor_text=title,
            title=f"Read our decision on: {title}",
        )
