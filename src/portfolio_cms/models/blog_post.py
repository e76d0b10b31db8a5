"""Blog post models."""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, Field

from portfolio_cms.models.base import ContentModel, ContentPatch, Timestamp


class BlogPost(ContentModel):
    """A stored blog post.

    Attributes:
        slug: URL-safe identifier, unique across posts.
        content: Markdown body.
        excerpt: Short summary; defaults to the start of ``content``.
        is_published: Whether the post is visible on the public blog.
        published_at: Set while published, None for drafts.
        created_at: Set once at creation, never changed.
    """

    title: str
    slug: str
    content: str
    excerpt: str | None = None
    image_url: str | None = None
    author_name: str
    author_id: str | None = None
    tags: list[str] = Field(default_factory=list)
    is_published: bool = False
    published_at: Timestamp | None = None
    created_at: Timestamp
    updated_at: Timestamp | None = None


class BlogPostCreate(BaseModel):
    """Input for a new post. Slug and timestamps are computed by the repository."""

    title: str = ""
    content: str
    author_name: str
    tags: list[str] = Field(default_factory=list)
    excerpt: str | None = None
    image_url: str | None = None
    is_published: bool = False
    author_id: str | None = None


class BlogPostPatch(ContentPatch):
    """Partial post update. ``created_at`` is never accepted."""

    nullable_fields: ClassVar[frozenset[str]] = frozenset(
        {"excerpt", "image_url", "author_id", "published_at", "slug"}
    )

    title: str | None = None
    slug: str | None = None
    content: str | None = None
    excerpt: str | None = None
    image_url: str | None = None
    author_name: str | None = None
    author_id: str | None = None
    tags: list[str] | None = None
    is_published: bool | None = None
    published_at: Timestamp | None = None
