"""Semantic tag extraction for decision topics."""

from __future__ import annotations

from safari_index.content.tag_patterns import DEFAULT_TAG_PATTERNS, TagPatternTable
from safari_index.schemas.topic import Topic, bucket_to_slug


def extract_tags(
    topic_id: str,
    topic: Topic | None,
    patterns: TagPatternTable = DEFAULT_TAG_PATTERNS,
) -> frozenset[str]:
    """Derive the deduplicated tag set for a topic id.

    Every pattern contained in ``topic_id`` contributes its tags, and the
    owning topic's bucket is always added in slug form.
    """
    tags: set[str] = set()
    for entry in patterns:
        if entry.pattern in topic_id:
            tags.update(entry.tags)

    if topic is not None:
        tags.add(bucket_to_slug(topic.bucket))

    return frozenset(tags)


def extract_topic_tags(topic: Topic, patterns: TagPatternTable = DEFAULT_TAG_PATTERNS) -> frozenset[str]:
    """Shorthand for ``extract_tags(topic.id, topic)``."""
    return extract_tags(topic.id, topic, patterns)
