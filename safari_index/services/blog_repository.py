"""Decision-anchored blog repository.

Registration never logs or drops problems on its own: validation errors and
link-limit warnings come back as a ``BlogRegistration`` so the caller
decides whether to fail a build, surface them, or ignore them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from safari_index.config import Settings, get_settings
from safari_index.schemas.blog import BlogContent, BlogRegistration

# (attribute, display name, minimum characters)
SECTION_MINIMUMS: tuple[tuple[str, str, int], ...] = (
    ("why_not_simple", "Why Not Simple", 200),
    ("variables", "Variables", 200),
    ("tradeoffs", "Trade-offs", 200),
    ("misconceptions", "Misconceptions", 100),
    ("breaks_down", "Breaks Down", 100),
    ("our_approach", "Our Approach", 100),
)


@dataclass(frozen=True, slots=True)
class BlogRules:
    """Editorial limits for decision blogs."""

    min_word_count: int = 1200
    max_word_count: int = 1800
    min_related_decisions: int = 1
    max_related_decisions: int = 3
    max_related_trips: int = 2
    max_related_guides: int = 2
    section_minimums: tuple[tuple[str, str, int], ...] = SECTION_MINIMUMS

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> BlogRules:
        settings = settings or get_settings()
        return cls(
            min_word_count=settings.blog_min_word_count,
            max_word_count=settings.blog_max_word_count,
            max_related_decisions=settings.blog_max_related_decisions,
            max_related_trips=settings.blog_max_related_trips,
            max_related_guides=settings.blog_max_related_guides,
        )


def validate_blog(blog: BlogContent, rules: BlogRules | None = None) -> list[str]:
    """Return editorial errors for a blog; empty when it meets requirements."""
    rules = rules or BlogRules.from_settings()
    errors: list[str] = []

    if blog.word_count < rules.min_word_count:
        errors.append(f"Word count too low: {blog.word_count} (min {rules.min_word_count})")
    if blog.word_count > rules.max_word_count:
        errors.append(f"Word count too high: {blog.word_count} (max {rules.max_word_count})")

    related_count = len(blog.related_decisions)
    if related_count < rules.min_related_decisions:
        errors.append(
            f"Too few related decisions: {related_count} (min {rules.min_related_decisions})"
        )
    if related_count > rules.max_related_decisions:
        errors.append(
            f"Too many related decisions: {related_count} (max {rules.max_related_decisions})"
        )
    if len(blog.related_trips) > rules.max_related_trips:
        errors.append(
            f"Too many related trips: {len(blog.related_trips)} (max {rules.max_related_trips})"
        )

    for attribute, display_name, minimum in rules.section_minimums:
        if len(getattr(blog, attribute).strip()) < minimum:
            errors.append(f'Section "{display_name}" too short or missing')

    return errors


def check_link_limits(blog: BlogContent, rules: BlogRules | None = None) -> list[str]:
    """Return link-limit warnings (soft editorial limits)."""
    rules = rules or BlogRules.from_settings()
    warnings: list[str] = []
    limits = (
        ("related decisions", len(blog.related_decisions), rules.max_related_decisions),
        ("related trips", len(blog.related_trips), rules.max_related_trips),
        ("related guides", len(blog.related_guides), rules.max_related_guides),
    )
    for label, count, maximum in limits:
        if count > maximum:
            warnings.append(f"Too many {label}: {count} (max {maximum})")
    return warnings


class BlogRepository(Protocol):
    """Lookup interface for decision blogs."""

    def register(self, blog: BlogContent) -> BlogRegistration: ...

    def get_by_decision(self, decision_slug: str) -> BlogContent | None: ...

    def all_published(self) -> list[BlogContent]: ...

    def decision_slugs_with_blogs(self) -> list[str]: ...

    def has_blog(self, decision_slug: str) -> bool: ...


class InMemoryBlogRepository:
    """Blog repository over an in-memory map keyed by decision slug."""

    def __init__(self, rules: BlogRules | None = None) -> None:
        self.rules = rules or BlogRules.from_settings()
        self._blogs: dict[str, BlogContent] = {}

    def register(self, blog: BlogContent) -> BlogRegistration:
        """Store a blog (replacing any previous one for its slug) and report its problems."""
        self._blogs[blog.decision_slug] = blog
        return BlogRegistration(
            decision_slug=blog.decision_slug,
            errors=validate_blog(blog, self.rules),
            warnings=check_link_limits(blog, self.rules),
        )

    def get_by_decision(self, decision_slug: str) -> BlogContent | None:
        return self._blogs.get(decision_slug)

    def all_published(self) -> list[BlogContent]:
        return [blog for blog in self._blogs.values() if blog.published]

    def decision_slugs_with_blogs(self) -> list[str]:
        return [slug for slug, blog in self._blogs.items() if blog.published]

    def has_blog(self, decision_slug: str) -> bool:
        blog = self._blogs.get(decision_slug)
        return blog is not None and blog.published
