"""Structured differences between two decision verdicts.

Only differences that change what a traveler would do are reported:
outcome, a confidence swing of at least the threshold, and trade-off or
assumption items present on one side only. Change conditions are not
compared.

Normalization for list comparison: lowercase, trim, collapse whitespace.
No fuzzy matching.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal

from safari_index.config import get_settings
from safari_index.schemas.decision import DecisionOutput, DecisionResponse, RefusalOutput
from safari_index.schemas.diff import DiffItem, DiffResult, SetDiff
from safari_index.schemas.topic import Topic

logger = logging.getLogger(__name__)

WHITESPACE_PATTERN = re.compile(r"\s+")

EvaluationLike = DecisionOutput | RefusalOutput | DecisionResponse | None


def normalize(value: str) -> str:
    """Comparison key: lowercase, trimmed, internal whitespace collapsed."""
    return WHITESPACE_PATTERN.sub(" ", value.lower().strip())


def diff_string_arrays(items_a: Sequence[str], items_b: Sequence[str]) -> SetDiff:
    """Items unique to each list, keeping original text and source order."""
    normalized_a = [normalize(item) for item in items_a]
    normalized_b = [normalize(item) for item in items_b]
    keys_a = set(normalized_a)
    keys_b = set(normalized_b)

    return SetDiff(
        only_in_a=[item for item, key in zip(items_a, normalized_a) if key not in keys_b],
        only_in_b=[item for item, key in zip(items_b, normalized_b) if key not in keys_a],
    )


def format_confidence(confidence: float) -> str:
    """Whole percentage, rounded half-up (0.8 -> "80%", 0.125 -> "13%")."""
    percent = (Decimal(str(confidence)) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return f"{percent}%"


def confidence_delta_reaches(confidence_a: float, confidence_b: float, threshold: float) -> bool:
    """Absolute confidence delta check on decimal values.

    Decimal keeps 0.7 vs 0.6 at exactly 0.1 instead of 0.09999999999999998.
    """
    delta = abs(Decimal(str(confidence_a)) - Decimal(str(confidence_b)))
    return delta >= Decimal(str(threshold))


def as_decision(evaluation: EvaluationLike) -> DecisionOutput | None:
    """Return the verdict behind an evaluation, or None for refusals and empty envelopes."""
    if isinstance(evaluation, DecisionResponse):
        evaluation = evaluation.evaluation
    if isinstance(evaluation, DecisionOutput):
        return evaluation
    return None


def _head(items: Sequence[str], limit: int | None) -> list[str]:
    return list(items) if limit is None else list(items[:limit])


def compute_diff(
    evaluation_a: EvaluationLike,
    evaluation_b: EvaluationLike,
    topic_a: Topic | None = None,
    topic_b: Topic | None = None,
    *,
    confidence_threshold: float | None = None,
    item_limit: int | None = None,
) -> DiffResult:
    """Compute the structured diff between two decision evaluations.

    Args:
        evaluation_a: Verdict, refusal or response envelope for side A
        evaluation_b: Verdict, refusal or response envelope for side B
        topic_a: Topic for side A (reserved for fit/misfit framing)
        topic_b: Topic for side B (reserved for fit/misfit framing)
        confidence_threshold: Minimum absolute confidence delta to report
        item_limit: Compare only the first N items of each list; None or
            a non-positive value compares whole lists

    Returns:
        DiffResult; all-empty with ``has_differences=False`` unless both
        sides are verdicts
    """
    _ = topic_a, topic_b
    decision_a = as_decision(evaluation_a)
    decision_b = as_decision(evaluation_b)
    if decision_a is None or decision_b is None:
        logger.debug(
            "Skipping diff for non-decision evaluation",
            extra={
                "side_a_is_decision": decision_a is not None,
                "side_b_is_decision": decision_b is not None,
            },
        )
        return DiffResult.empty()

    settings = get_settings()
    if confidence_threshold is None:
        confidence_threshold = settings.diff_confidence_threshold
    if item_limit is None:
        item_limit = settings.diff_item_limit
    if item_limit is not None and item_limit <= 0:
        item_limit = None

    outcome_diff: DiffItem | None = None
    if decision_a.outcome != decision_b.outcome:
        outcome_diff = DiffItem(
            label="Outcome",
            value_a=decision_a.outcome,
            value_b=decision_b.outcome,
        )

    confidence_diff: DiffItem | None = None
    if confidence_delta_reaches(decision_a.confidence, decision_b.confidence, confidence_threshold):
        confidence_diff = DiffItem(
            label="Confidence",
            value_a=format_confidence(decision_a.confidence),
            value_b=format_confidence(decision_b.confidence),
        )

    gains_diff = diff_string_arrays(
        _head(decision_a.tradeoffs.gains, item_limit),
        _head(decision_b.tradeoffs.gains, item_limit),
    )
    losses_diff = diff_string_arrays(
        _head(decision_a.tradeoffs.losses, item_limit),
        _head(decision_b.tradeoffs.losses, item_limit),
    )
    # Assumptions are compared by text only; ids and confidences are ignored
    assumptions_diff = diff_string_arrays(
        _head([assumption.text for assumption in decision_a.assumptions], item_limit),
        _head([assumption.text for assumption in decision_b.assumptions], item_limit),
    )

    has_differences = (
        outcome_diff is not None
        or confidence_diff is not None
        or not gains_diff.is_empty
        or not losses_diff.is_empty
        or not assumptions_diff.is_empty
    )

    return DiffResult(
        outcome=outcome_diff,
        confidence=confidence_diff,
        gains=gains_diff,
        losses=losses_diff,
        assumptions=assumptions_diff,
        has_differences=has_differences,
    )
