"""Unit tests for blog validation and the in-memory blog repository."""

from typing import Any

from safari_index.schemas.blog import BlogContent
from safari_index.services.blog_repository import (
    BlogRules,
    InMemoryBlogRepository,
    check_link_limits,
    validate_blog,
)

LONG_SECTION = "Migration herds move with the rains across the ecosystem. " * 5
SHORT_SECTION = "Rains vary year to year, so plan buffers. " * 3


def _link(slug: str, link_type: str = "decision") -> dict[str, str]:
    return {"slug": slug, "title": f"Title for {slug}", "type": link_type}


def _blog(**overrides: Any) -> BlogContent:
    payload: dict[str, Any] = {
        "decision_slug": "tanzania-safari-february",
        "title": "Should I go on safari in Tanzania in February?",
        "subtitle": "Calving season trade-offs",
        "updated_at": "2026-01-15",
        "word_count": 1450,
        "why_not_simple": LONG_SECTION,
        "variables": LONG_SECTION,
        "tradeoffs": LONG_SECTION,
        "misconceptions": SHORT_SECTION,
        "breaks_down": SHORT_SECTION,
        "our_approach": SHORT_SECTION,
        "related_decisions": [_link("tanzania-safari-july")],
        "related_trips": [_link("northern-circuit", "trip")],
        "related_guides": [],
        "published": True,
    }
    payload.update(overrides)
    return BlogContent.model_validate(payload)


def test_valid_blog_has_no_errors() -> None:
    assert validate_blog(_blog(), BlogRules()) == []
    assert check_link_limits(_blog(), BlogRules()) == []


def test_word_count_bounds() -> None:
    assert validate_blog(_blog(word_count=900), BlogRules()) == [
        "Word count too low: 900 (min 1200)"
    ]
    assert validate_blog(_blog(word_count=2000), BlogRules()) == [
        "Word count too high: 2000 (max 1800)"
    ]
    assert validate_blog(_blog(word_count=1200), BlogRules()) == []
    assert validate_blog(_blog(word_count=1800), BlogRules()) == []


def test_related_decision_bounds() -> None:
    none_related = validate_blog(_blog(related_decisions=None), BlogRules())
    too_many = validate_blog(
        _blog(related_decisions=[_link(f"decision-{index}") for index in range(4)]),
        BlogRules(),
    )

    assert none_related == ["Too few related decisions: 0 (min 1)"]
    assert too_many == ["Too many related decisions: 4 (max 3)"]


def test_related_trip_limit() -> None:
    trips = [_link(f"trip-{index}", "trip") for index in range(3)]

    assert validate_blog(_blog(related_trips=trips), BlogRules()) == [
        "Too many related trips: 3 (max 2)"
    ]


def test_short_or_missing_sections_are_reported() -> None:
    blog = _blog(variables="Too short.", our_approach=None, breaks_down="   " + "x" * 50 + "   ")

    errors = validate_blog(blog, BlogRules())

    assert errors == [
        'Section "Variables" too short or missing',
        'Section "Breaks Down" too short or missing',
        'Section "Our Approach" too short or missing',
    ]


def test_link_limit_warnings_include_guides() -> None:
    guides = [_link(f"guide-{index}", "guide") for index in range(3)]

    warnings = check_link_limits(_blog(related_guides=guides), BlogRules())

    assert warnings == ["Too many related guides: 3 (max 2)"]


def test_rules_can_be_loosened() -> None:
    rules = BlogRules(min_word_count=100, max_related_trips=5)
    blog = _blog(word_count=150, related_trips=[_link(f"t{i}", "trip") for i in range(4)])

    assert validate_blog(blog, rules) == []


def test_register_returns_problems_as_data() -> None:
    repository = InMemoryBlogRepository(BlogRules())

    registration = repository.register(_blog(word_count=100, published=False))

    assert registration.decision_slug == "tanzania-safari-february"
    assert registration.is_valid is False
    assert registration.errors == ["Word count too low: 100 (min 1200)"]
    assert registration.warnings == []
    assert repository.get_by_decision("tanzania-safari-february") is not None


def test_only_published_blogs_are_listed() -> None:
    repository = InMemoryBlogRepository(BlogRules())
    repository.register(_blog())
    repository.register(_blog(decision_slug="kenya-safari-august", published=False))

    assert repository.has_blog("tanzania-safari-february") is True
    assert repository.has_blog("kenya-safari-august") is False
    assert repository.has_blog("missing") is False
    assert repository.decision_slugs_with_blogs() == ["tanzania-safari-february"]
    assert [blog.decision_slug for blog in repository.all_published()] == [
        "tanzania-safari-february"
    ]


def test_register_replaces_existing_blog_for_slug() -> None:
    repository = InMemoryBlogRepository(BlogRules())
    repository.register(_blog(subtitle="First"))
    repository.register(_blog(subtitle="Second"))

    blog = repository.get_by_decision("tanzania-safari-february")

    assert blog is not None
    assert blog.subtitle == "Second"
    assert len(repository.all_published()) == 1
