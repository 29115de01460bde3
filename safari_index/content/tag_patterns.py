"""Topic tag derivation table.

Each entry maps an id substring to the tags it implies. Matching is plain
substring containment, so one id can pick up several unrelated entries
(``budget-tanzania`` matches ``budget`` and ``budget-``, ``tz-jul`` matches
``tz-`` and ``jul``). Recall matters more than precision for related links.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TagPattern:
    pattern: str
    tags: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class TagPatternTable:
    """Ordered, immutable ``substring -> tags`` table."""

    entries: tuple[TagPattern, ...]

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, Iterable[str]]]) -> TagPatternTable:
        return cls(
            entries=tuple(TagPattern(pattern=pattern, tags=tuple(tags)) for pattern, tags in pairs)
        )

    def __iter__(self) -> Iterator[TagPattern]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


DEFAULT_TAG_PATTERNS = TagPatternTable.from_pairs(
    (
        # Destinations
        ("tz-", ("tanzania", "east-africa")),
        ("ke-", ("kenya", "east-africa")),
        ("bw-", ("botswana", "southern-africa")),
        ("sa-", ("south-africa", "southern-africa")),
        ("rwanda", ("rwanda", "gorillas", "east-africa")),
        ("uganda", ("uganda", "gorillas", "east-africa")),
        ("namibia", ("namibia", "southern-africa")),
        ("zambia", ("zambia", "southern-africa")),
        ("zimbabwe", ("zimbabwe", "southern-africa")),
        ("okavango", ("botswana", "delta", "southern-africa")),
        ("serengeti", ("tanzania", "serengeti", "east-africa")),
        ("mara", ("kenya", "masai-mara", "east-africa")),
        ("kruger", ("south-africa", "kruger", "southern-africa")),
        ("ngorongoro", ("tanzania", "ngorongoro", "east-africa")),
        # Experiences
        ("walking", ("walking-safari", "adventure")),
        ("self-drive", ("self-drive", "independent")),
        ("balloon", ("balloon", "special-experience")),
        ("mokoro", ("mokoro", "water-safari", "botswana")),
        ("photo", ("photography", "special-interest")),
        ("night", ("night-drives", "nocturnal")),
        # Accommodation
        ("lodge", ("accommodation", "lodge")),
        ("tented", ("accommodation", "tented-camp")),
        ("luxury", ("accommodation", "luxury")),
        ("budget", ("accommodation", "budget")),
        ("camp", ("accommodation", "camping")),
        # Timing
        ("migration", ("migration", "timing", "wildlife")),
        ("calving", ("calving", "timing", "serengeti")),
        ("crossing", ("river-crossing", "migration", "timing")),
        ("dry-season", ("dry-season", "timing")),
        ("green-season", ("green-season", "timing")),
        ("christmas", ("christmas", "holiday", "timing")),
        ("feb", ("february", "calving", "timing")),
        ("jul", ("july", "dry-season", "timing")),
        ("aug", ("august", "dry-season", "timing")),
        ("jun", ("june", "dry-season", "timing")),
        # Travelers
        ("family", ("family", "children")),
        ("solo", ("solo", "independent")),
        ("honeymoon", ("honeymoon", "couples", "romance")),
        ("multigenerational", ("multigenerational", "family")),
        ("first-timer", ("first-time", "beginner")),
        # Cost
        ("budget-", ("budget", "cost", "value")),
        ("cost", ("cost", "budget")),
        ("value", ("value", "cost")),
        ("splurge", ("luxury", "splurge", "cost")),
        ("cheap", ("budget", "warning", "cost")),
        # Risk
        ("malaria", ("health", "malaria", "risk")),
        ("yellow-fever", ("health", "vaccination", "risk")),
        ("political", ("safety", "risk")),
        ("ethical", ("ethics", "responsible")),
    )
)
