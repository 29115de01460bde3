"""Relevance scoring between a source topic and a link candidate.

The score answers "what should I link *to* from here", so it is asymmetric:
the assurance, baseline and SEO bonuses only look at the candidate.
"""

from __future__ import annotations

from collections.abc import Container, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from safari_index.content.tag_patterns import DEFAULT_TAG_PATTERNS, TagPatternTable
from safari_index.schemas.topic import Topic
from safari_index.services.tagging import extract_topic_tags


@dataclass(frozen=True, slots=True)
class RelevanceWeights:
    """Additive scoring weights."""

    same_bucket: float = 2.0
    per_shared_tag: float = 0.5
    assurance_eligible: float = 0.5
    has_baseline: float = 1.0
    high_seo_intent: float = 0.3


DEFAULT_RELEVANCE_WEIGHTS = RelevanceWeights()


@dataclass(frozen=True, slots=True)
class CandidateRelevance:
    """Per-query relevance record for one candidate topic."""

    topic_id: str
    tags: frozenset[str]
    score: float
    shared_tags: frozenset[str] = frozenset()
    score_breakdown: Mapping[str, float] = field(default_factory=lambda: MappingProxyType({}))


def score_candidate(
    source: Topic,
    candidate: Topic,
    *,
    baseline_topic_ids: Container[str] = frozenset(),
    patterns: TagPatternTable = DEFAULT_TAG_PATTERNS,
    weights: RelevanceWeights = DEFAULT_RELEVANCE_WEIGHTS,
    source_tags: frozenset[str] | None = None,
) -> CandidateRelevance:
    """Score ``candidate`` as a link target from ``source``.

    Args:
        source: Topic whose page will hold the links
        candidate: Potential link target
        baseline_topic_ids: Presence map of topics with a precomputed baseline decision
        patterns: Tag derivation table
        weights: Additive scoring weights
        source_tags: Precomputed tags for ``source`` when scoring many candidates

    Returns:
        CandidateRelevance with the total score and its breakdown
    """
    if source_tags is None:
        source_tags = extract_topic_tags(source, patterns)
    candidate_tags = extract_topic_tags(candidate, patterns)
    shared_tags = source_tags & candidate_tags

    breakdown = {
        "same_bucket": weights.same_bucket if source.bucket == candidate.bucket else 0.0,
        "shared_tags": weights.per_shared_tag * len(shared_tags),
        "assurance_eligible": weights.assurance_eligible if candidate.assurance_eligible else 0.0,
        "has_baseline": weights.has_baseline if candidate.id in baseline_topic_ids else 0.0,
        "high_seo_intent": weights.high_seo_intent if candidate.seo_intent == "high" else 0.0,
    }

    # Summed in rule order so the float total is reproducible
    score = sum(breakdown.values(), 0.0)

    return CandidateRelevance(
        topic_id=candidate.id,
        tags=candidate_tags,
        score=score,
        shared_tags=shared_tags,
        score_breakdown=MappingProxyType(breakdown),
    )


def calculate_relevance_score(
    source: Topic,
    candidate: Topic,
    *,
    baseline_topic_ids: Container[str] = frozenset(),
    patterns: TagPatternTable = DEFAULT_TAG_PATTERNS,
    weights: RelevanceWeights = DEFAULT_RELEVANCE_WEIGHTS,
) -> float:
    """Return the non-negative relevance score of ``candidate`` from ``source``."""
    return score_candidate(
        source,
        candidate,
        baseline_topic_ids=baseline_topic_ids,
        patterns=patterns,
        weights=weights,
    ).score
