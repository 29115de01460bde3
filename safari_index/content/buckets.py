"""Bucket cross-linking table."""

from types import MappingProxyType

# bucket -> buckets worth cross-linking from its hub pages
DEFAULT_BUCKET_RELATIONSHIPS: MappingProxyType[str, tuple[str, ...]] = MappingProxyType(
    {
        "personal_fit": ("destination_choice", "experience_type"),
        "destination_choice": ("timing", "value_cost"),
        "timing": ("destination_choice", "value_cost"),
        "experience_type": ("accommodation", "logistics"),
        "accommodation": ("value_cost", "experience_type"),
        "logistics": ("timing", "accommodation"),
        "risk_ethics": ("destination_choice", "personal_fit"),
        "value_cost": ("accommodation", "timing"),
    }
)
