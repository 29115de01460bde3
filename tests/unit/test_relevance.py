"""Unit tests for relevance scoring."""

import itertools

import pytest

from safari_index.schemas.topic import Topic
from safari_index.services.relevance import (
    RelevanceWeights,
    calculate_relevance_score,
    score_candidate,
)


def _topic(
    *,
    topic_id: str,
    bucket: str,
    assurance_eligible: bool = False,
    seo_intent: str = "medium",
) -> Topic:
    return Topic(
        id=topic_id,
        bucket=bucket,
        title=f"Question about {topic_id}?",
        assurance_eligible=assurance_eligible,
        seo_intent=seo_intent,
        launch_priority="P0",
    )


TZ_FEB = _topic(topic_id="tz-feb", bucket="timing", assurance_eligible=True, seo_intent="high")
TZ_JUL = _topic(topic_id="tz-jul", bucket="timing", assurance_eligible=True, seo_intent="high")
KE_AUG = _topic(topic_id="ke-aug", bucket="timing")
TZ_VS_KE = _topic(
    topic_id="tz-vs-ke",
    bucket="destination_choice",
    assurance_eligible=True,
    seo_intent="high",
)
MALARIA = _topic(topic_id="malaria-decision", bucket="risk_ethics", seo_intent="low")


def test_score_applies_every_rule_in_order() -> None:
    relevance = score_candidate(TZ_FEB, TZ_JUL, baseline_topic_ids={"tz-jul"})

    assert relevance.topic_id == "tz-jul"
    assert relevance.shared_tags == {"tanzania", "east-africa", "timing"}
    assert relevance.score_breakdown == {
        "same_bucket": 2.0,
        "shared_tags": 1.5,
        "assurance_eligible": 0.5,
        "has_baseline": 1.0,
        "high_seo_intent": 0.3,
    }
    assert relevance.score == pytest.approx(5.3)


def test_score_breakdown_is_read_only() -> None:
    relevance = score_candidate(TZ_FEB, KE_AUG)

    with pytest.raises(TypeError):
        relevance.score_breakdown["same_bucket"] = 99.0  # type: ignore[index]

    assert relevance.score == pytest.approx(3.0)


def test_score_counts_shared_tags_across_buckets() -> None:
    score = calculate_relevance_score(TZ_FEB, TZ_VS_KE)

    # tanzania + east-africa shared, plus assurance and high intent
    assert score == pytest.approx(1.0 + 0.5 + 0.3)


def test_unrelated_candidate_scores_zero() -> None:
    assert calculate_relevance_score(TZ_FEB, MALARIA) == 0.0


def test_score_is_asymmetric() -> None:
    forward = calculate_relevance_score(TZ_FEB, TZ_JUL, baseline_topic_ids={"tz-jul"})
    backward = calculate_relevance_score(TZ_JUL, TZ_FEB, baseline_topic_ids={"tz-jul"})

    assert forward == pytest.approx(5.3)
    assert backward == pytest.approx(4.3)


def test_same_bucket_candidate_always_scores_at_least_two() -> None:
    candidate = _topic(topic_id="zzz", bucket="timing", seo_intent="low")
    source = _topic(topic_id="qqq", bucket="timing")

    assert calculate_relevance_score(source, candidate) >= 2.0
    assert calculate_relevance_score(TZ_FEB, KE_AUG) == pytest.approx(2.0 + 1.0)


def test_scores_are_never_negative() -> None:
    topics = [TZ_FEB, TZ_JUL, KE_AUG, TZ_VS_KE, MALARIA]

    for source, candidate in itertools.permutations(topics, 2):
        assert calculate_relevance_score(source, candidate, baseline_topic_ids={"ke-aug"}) >= 0


def test_custom_weights_are_respected() -> None:
    weights = RelevanceWeights(same_bucket=10.0, per_shared_tag=0.0, high_seo_intent=0.0)

    score = calculate_relevance_score(TZ_FEB, TZ_JUL, weights=weights)

    assert score == pytest.approx(10.0 + 0.5)
