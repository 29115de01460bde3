"""Immutable, ordered topic catalog supplied by the content layer."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Any

from safari_index.core.exceptions import DuplicateTopicError, TopicNotFoundError
from safari_index.schemas.topic import Topic


class TopicCatalog:
    """Topics in their original catalog order, indexed by id.

    Catalog order is significant: related-decision ties keep it.
    """

    __slots__ = ("_topics", "_by_id")

    def __init__(self, topics: Iterable[Topic]) -> None:
        ordered = tuple(topics)
        by_id: dict[str, Topic] = {}
        for topic in ordered:
            if topic.id in by_id:
                raise DuplicateTopicError(topic.id)
            by_id[topic.id] = topic
        self._topics = ordered
        self._by_id = MappingProxyType(by_id)

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any]]) -> TopicCatalog:
        """Validate raw content records into a catalog."""
        return cls(Topic.model_validate(record) for record in records)

    def __iter__(self) -> Iterator[Topic]:
        return iter(self._topics)

    def __len__(self) -> int:
        return len(self._topics)

    def __contains__(self, topic_id: object) -> bool:
        return topic_id in self._by_id

    def get(self, topic_id: str) -> Topic | None:
        return self._by_id.get(topic_id)

    def require(self, topic_id: str) -> Topic:
        topic = self._by_id.get(topic_id)
        if topic is None:
            raise TopicNotFoundError(topic_id)
        return topic

    def in_tier(self, launch_priority: str) -> list[Topic]:
        return [topic for topic in self._topics if topic.launch_priority == launch_priority]

    def in_bucket(self, bucket: str, *, launch_priority: str | None = None) -> list[Topic]:
        return [
            topic
            for topic in self._topics
            if topic.bucket == bucket
            and (launch_priority is None or topic.launch_priority == launch_priority)
        ]
