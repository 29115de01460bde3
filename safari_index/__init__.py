"""Safari Index content-intelligence layer: related-decision linking and verdict diffs."""
from safari_index.schemas.decision import (
    DecisionOutput,
    DecisionResponse,
    RefusalOutput,
)
from safari_index.schemas.diff import DiffResult, SetDiff
from safari_index.schemas.links import InternalLink, RelatedDecision
from safari_index.schemas.topic import Topic
from safari_index.services.baseline_decisions import (
    BaselineDecisionStore,
    is_capacity_or_service_refusal,
)
from safari_index.services.compare_diff import compute_diff, diff_string_arrays, normalize
from safari_index.services.internal_links import InternalLinkService, LinkingPolicy
from safari_index.services.relevance import calculate_relevance_score
from safari_index.services.tagging import extract_tags
from safari_index.services.topic_catalog import TopicCatalog

__all__ = [
    "Topic",
    "TopicCatalog",
    "DecisionOutput",
    "RefusalOutput",
    "DecisionResponse",
    "DiffResult",
    "SetDiff",
    "InternalLink",
    "RelatedDecision",
    "BaselineDecisionStore",
    "InternalLinkService",
    "LinkingPolicy",
    "extract_tags",
    "calculate_relevance_score",
    "normalize",
    "diff_string_arrays",
    "compute_diff",
    "is_capacity_or_service_refusal",
]
