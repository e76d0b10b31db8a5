"""Blog repository: posts with unique slugs and consistent publish state.

Three rules do not hold on their own and are maintained here:

- every post has a URL slug that no other post uses;
- ``published_at`` is set exactly while ``is_published`` is true, and an
  existing publish date survives edits;
- ``excerpt`` falls back to the first 200 characters of the content.

Slug uniqueness is a check-then-write sequence without a transaction. Two
concurrent creations with the same title can both see the slug as free and
store duplicates. ``reserve_slug`` is the single place to swap in a
conditional write if the store ever supports one.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from portfolio_cms.constants.collections import BLOG_POSTS_COLLECTION, SLUG_MAX_ATTEMPTS
from portfolio_cms.constants.seed_data import DEFAULT_BLOG_POSTS
from portfolio_cms.data.store import DocumentStore, OrderBy
from portfolio_cms.errors import NotFoundError, SlugGenerationExhausted, ValidationError
from portfolio_cms.models.blog_post import BlogPost, BlogPostCreate, BlogPostPatch
from portfolio_cms.services.base import logged_failure, require_id, validate_model
from portfolio_cms.utils.text import default_excerpt, generate_slug

logger = logging.getLogger(__name__)

__all__ = ["BlogRepository"]

_NEWEST_FIRST = (OrderBy("published_at", descending=True),)


class BlogRepository:
    """CRUD for blog posts plus slug and publish-state rules."""

    collection = BLOG_POSTS_COLLECTION

    def __init__(self, store: DocumentStore) -> None:
        self.store = store

    async def list_posts(
        self, limit: int | None = None, only_published: bool = True
    ) -> list[BlogPost]:
        """Return posts newest first by ``published_at``.

        Args:
            limit: Maximum number of posts to return.
            only_published: Exclude drafts when True.

        Returns:
            Matching posts; drafts (no ``published_at``) come last.
        """
        if limit is not None and limit < 1:
            raise ValidationError("limit must be a positive integer")

        where = {"is_published": True} if only_published else None
        with logged_failure(logger, "list_posts", self.collection):
            snapshots = await self.store.query(
                self.collection, where=where, order_by=_NEWEST_FIRST, limit=limit
            )
        return [BlogPost.model_validate(s.to_dict()) for s in snapshots]

    async def get(self, post_id: str) -> BlogPost | None:
        """Return the post with *post_id*, or None."""
        require_id(post_id, "get")
        with logged_failure(logger, "get", self.collection, post_id):
            snapshot = await self.store.get(self.collection, post_id)
        if snapshot is None:
            return None
        return BlogPost.model_validate(snapshot.to_dict())

    async def get_by_slug(self, slug: str) -> BlogPost | None:
        """Return the post using *slug*, or None if no post has it."""
        if not slug:
            return None
        with logged_failure(logger, "get_by_slug", self.collection, slug):
            return await self._find_by_slug(slug)

    async def _find_by_slug(self, slug: str) -> BlogPost | None:
        snapshots = await self.store.query(self.collection, where={"slug": slug}, limit=1)
        if not snapshots:
            return None
        return BlogPost.model_validate(snapshots[0].to_dict())

    async def reserve_slug(self, candidate: str, *, exclude_id: str | None = None) -> str:
        """Return *candidate*, or the first free ``candidate-N`` variant.

        A slug held by the post *exclude_id* counts as free. This is a plain
        lookup followed by the caller's write; it is not atomic. Store failures
        propagate unlogged to the calling operation.

        Raises:
            SlugGenerationExhausted: If no free slug is found within
                ``SLUG_MAX_ATTEMPTS`` lookups.
        """
        slug = candidate
        for attempt in range(1, SLUG_MAX_ATTEMPTS + 1):
            holder = await self._find_by_slug(slug)
            if holder is None or (exclude_id is not None and holder.id == exclude_id):
                return slug
            slug = f"{candidate}-{attempt}"
        raise SlugGenerationExhausted(candidate, SLUG_MAX_ATTEMPTS)

    async def create_post(self, data: BlogPostCreate) -> BlogPost:
        """Create a post with a generated unique slug and computed fields.

        Raises:
            SlugGenerationExhausted: If every slug variant is taken.
            StoreUnavailable: If the store cannot be reached.
        """
        with logged_failure(logger, "create_post", self.collection, data.title):
            now = self.store.server_timestamp()
            slug = await self.reserve_slug(generate_slug(data.title, now=now))

            post = BlogPost(
                title=data.title,
                slug=slug,
                content=data.content,
                excerpt=data.excerpt or default_excerpt(data.content),
                image_url=data.image_url or None,
                author_name=data.author_name,
                author_id=data.author_id or None,
                tags=list(data.tags),
                is_published=data.is_published,
                published_at=now if data.is_published else None,
                created_at=now,
                updated_at=now,
            )
            doc_id = await self.store.add(self.collection, post.to_document())

        logger.info("Created blog post %s with slug %s", doc_id, slug)
        return post.model_copy(update={"id": doc_id})

    async def update_post(self, post_id: str, patch: BlogPostPatch) -> BlogPost:
        """Merge *patch* into the post, keeping slug and publish state consistent.

        The slug only changes when the patch carries one (normalized) or
        clears it (regenerated from the title); either way it is re-checked
        for uniqueness against the other posts. A title change alone keeps
        the existing slug. ``created_at`` is never written.

        Raises:
            ValidationError: If *post_id* is empty.
            NotFoundError: If the post does not exist.
            SlugGenerationExhausted: If a new slug cannot be made unique.
        """
        require_id(post_id, "update_post")
        with logged_failure(logger, "update_post", self.collection, post_id):
            snapshot = await self.store.get(self.collection, post_id)
            if snapshot is None:
                raise NotFoundError(self.collection, post_id)
            existing = BlogPost.model_validate(snapshot.to_dict())

            fields = patch.model_dump(exclude_unset=True)
            now = self.store.server_timestamp()

            changes: dict[str, Any] = dict(fields)
            changes["slug"] = await self._resolve_slug(existing, fields, now)
            changes["excerpt"] = self._resolve_excerpt(existing, fields)
            changes["updated_at"] = now
            changes["published_at"] = self._resolve_published_at(existing, fields, now)

            updated = validate_model(BlogPost, {**existing.model_dump(), **changes})
            await self.store.set(
                self.collection,
                post_id,
                updated.model_dump(mode="json", include=set(changes)),
                merge=True,
            )

        logger.info("Updated blog post %s", post_id)
        return updated

    async def _resolve_slug(
        self, existing: BlogPost, fields: dict[str, Any], now: datetime
    ) -> str:
        if "slug" not in fields:
            return existing.slug
        source = fields["slug"] or fields.get("title", existing.title)
        candidate = generate_slug(source, now=now)
        if candidate == existing.slug:
            return candidate
        return await self.reserve_slug(candidate, exclude_id=existing.id)

    @staticmethod
    def _resolve_excerpt(existing: BlogPost, fields: dict[str, Any]) -> str | None:
        excerpt = fields["excerpt"] if "excerpt" in fields else existing.excerpt
        if excerpt:
            return excerpt
        return default_excerpt(fields.get("content", existing.content))

    @staticmethod
    def _resolve_published_at(
        existing: BlogPost, fields: dict[str, Any], now: datetime
    ) -> datetime | None:
        is_published = fields.get("is_published", existing.is_published)
        if not is_published:
            return None
        # Re-publishing keeps the original date; drafts never hold one.
        return fields.get("published_at") or existing.published_at or now

    async def delete_post(self, post_id: str) -> None:
        """Remove the post. Deleting a missing id is not an error."""
        require_id(post_id, "delete_post")
        with logged_failure(logger, "delete_post", self.collection, post_id):
            await self.store.delete(self.collection, post_id)

    async def initialize_default_posts(self) -> int:
        """Seed the default posts through ``create_post`` when the collection is empty.

        Safe to call on every start: the emptiness check runs each time.

        Returns:
            Number of posts created.
        """
        with logged_failure(logger, "initialize", self.collection):
            if await self.store.query(self.collection, limit=1):
                logger.debug("Blog posts already exist, skipping seed")
                return 0

            logger.info("No blog posts found, seeding %d default posts", len(DEFAULT_BLOG_POSTS))
            for data in DEFAULT_BLOG_POSTS:
                await self.create_post(validate_model(BlogPostCreate, data))
        return len(DEFAULT_BLOG_POSTS)
