"""Baseline decision lookup and capacity-refusal detection.

Baselines are precomputed, non-personalized verdicts rendered when the live
decision service is at capacity. This module only answers lookups over
records the caller already loaded; it never reads storage itself.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any

from safari_index.schemas.decision import DecisionOutput, DecisionResponse, RefusalOutput

logger = logging.getLogger(__name__)

CAPACITY_REFUSAL_PHRASES: tuple[str, ...] = (
    "at capacity",
    "temporarily unable",
    "temporarily unavailable",
    "service is temporarily",
    "capacity constraints",
    "try again later",
    "wait before trying",
    "service degraded",
)


class BaselineDecisionStore(Mapping[str, DecisionOutput]):
    """Read-only ``topic_id -> DecisionOutput`` map.

    Also usable as the baseline presence map for relevance scoring, since
    ``topic_id in store`` is all the scorer asks.
    """

    def __init__(self, baselines: Mapping[str, DecisionOutput] | None = None) -> None:
        self._baselines = MappingProxyType(dict(baselines or {}))

    @classmethod
    def from_records(cls, records: Mapping[str, Mapping[str, Any]]) -> BaselineDecisionStore:
        """Validate raw baseline payloads keyed by topic id."""
        baselines = {
            topic_id: DecisionOutput.model_validate(payload)
            for topic_id, payload in records.items()
        }
        logger.debug("Loaded baseline decisions", extra={"baseline_count": len(baselines)})
        return cls(baselines)

    def __getitem__(self, topic_id: str) -> DecisionOutput:
        return self._baselines[topic_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._baselines)

    def __len__(self) -> int:
        return len(self._baselines)

    def has_baseline(self, topic_id: str) -> bool:
        return topic_id in self._baselines

    def get_baseline_decision(self, topic_id: str) -> DecisionOutput | None:
        return self._baselines.get(topic_id)

    def topic_ids(self) -> list[str]:
        return list(self._baselines)


def _contains_capacity_phrase(text: str) -> bool:
    lowered = (text or "").lower()
    return any(phrase in lowered for phrase in CAPACITY_REFUSAL_PHRASES)


def is_capacity_or_service_refusal(
    output: DecisionResponse | RefusalOutput | DecisionOutput | None,
) -> bool:
    """Return True when a refusal stems from service capacity, not user input.

    Such refusals should fall back to the baseline decision instead of asking
    the traveler for more inputs.
    """
    if isinstance(output, DecisionResponse):
        output = output.evaluation
    if not isinstance(output, RefusalOutput):
        return False

    if output.code == "SERVICE_DEGRADED":
        return True

    return _contains_capacity_phrase(output.reason) or _contains_capacity_phrase(
        output.safe_next_step
    )
