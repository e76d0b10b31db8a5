"""Text helpers for blog posts: URL slugs and excerpts."""

from __future__ import annotations

import re
from datetime import UTC, datetime

from portfolio_cms.constants.collections import EXCERPT_ELLIPSIS, EXCERPT_LENGTH

__all__ = ["default_excerpt", "generate_slug"]

_WHITESPACE_RUNS = re.compile(r"\s+")
_NON_SLUG_CHARS = re.compile(r"[^a-z0-9-]+")
_HYPHEN_RUNS = re.compile(r"-{2,}")


def generate_slug(title: str | None, *, now: datetime | None = None) -> str:
    """Derive a URL-safe slug from *title*.

    Lowercases and trims the title, turns whitespace runs into a single
    hyphen, drops every character outside ``[a-z0-9-]`` and collapses
    repeated hyphens. Leading and trailing hyphens are removed.

    Args:
        title: Post title. May be empty or None.
        now: Clock value for the fallback slug. Defaults to the current time.

    Returns:
        A non-empty slug. Titles with nothing usable fall back to
        ``post-<epoch-millis>``.
    """
    slug = (title or "").lower().strip()
    slug = _WHITESPACE_RUNS.sub("-", slug)
    slug = _NON_SLUG_CHARS.sub("", slug)
    slug = _HYPHEN_RUNS.sub("-", slug).strip("-")
    if not slug:
        moment = now or datetime.now(UTC)
        slug = f"post-{int(moment.timestamp() * 1000)}"
    return slug


def default_excerpt(content: str | None, length: int = EXCERPT_LENGTH) -> str | None:
    """Return the first *length* characters of *content*, with an ellipsis if cut.

    Empty content yields None.
    """
    if not content:
        return None
    if len(content) > length:
        return content[:length] + EXCERPT_ELLIPSIS
    return content
