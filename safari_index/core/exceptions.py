"""Custom exception classes for the content-intelligence layer."""

from typing import Any


class SafariIndexError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


# Catalog Errors
class CatalogError(SafariIndexError):
    """Base class for topic catalog errors."""

    pass


class TopicNotFoundError(CatalogError):
    """Topic not found."""

    def __init__(self, topic_id: str) -> None:
        super().__init__(f"Topic not found: {topic_id}", {"topic_id": topic_id})


class DuplicateTopicError(CatalogError):
    """Catalog was built with a repeated topic id."""

    def __init__(self, topic_id: str) -> None:
        super().__init__(f"Duplicate topic id in catalog: {topic_id}", {"topic_id": topic_id})
