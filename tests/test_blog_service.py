"""Tests for the blog repository: slugs, publish state, excerpts and listing."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from portfolio_cms.constants.seed_data import DEFAULT_BLOG_POSTS
from portfolio_cms.data.store import DocumentSnapshot, FilterValue, OrderBy, SqlDocumentStore
from portfolio_cms.errors import (
    NotFoundError,
    SlugGenerationExhausted,
    StoreUnavailable,
    ValidationError,
)
from portfolio_cms.models import BlogPostCreate, BlogPostPatch
from portfolio_cms.services import BlogRepository

if TYPE_CHECKING:
    from conftest import TickingClock


def _post(title: str = "Hello World", **overrides) -> BlogPostCreate:
    data = {
        "title": title,
        "content": "Some markdown content.",
        "author_name": "Alex Rivera",
        "tags": ["python"],
        "is_published": True,
    }
    data.update(overrides)
    return BlogPostCreate(**data)


@pytest.fixture
def blog(store: SqlDocumentStore) -> BlogRepository:
    return BlogRepository(store)


@pytest.mark.asyncio
async def test_create_post_generates_slug_and_timestamps(
    blog: BlogRepository, clock: TickingClock
) -> None:
    post = await blog.create_post(_post("Hello World!"))

    assert post.id
    assert post.slug == "hello-world"
    assert post.published_at == clock.now
    assert post.created_at == clock.now
    assert post.updated_at == clock.now

    stored = await blog.get(post.id)
    assert stored == post


@pytest.mark.asyncio
async def test_create_post_reads_the_clock_once(blog: BlogRepository, clock: TickingClock) -> None:
    await blog.create_post(_post())
    assert clock.calls == 1


@pytest.mark.asyncio
async def test_create_draft_has_no_published_at(blog: BlogRepository) -> None:
    post = await blog.create_post(_post(is_published=False))
    assert post.is_published is False
    assert post.published_at is None


@pytest.mark.asyncio
async def test_duplicate_titles_get_numbered_slugs(blog: BlogRepository) -> None:
    slugs = [(await blog.create_post(_post("Same Title"))).slug for _ in range(3)]
    assert slugs == ["same-title", "same-title-1", "same-title-2"]


@pytest.mark.asyncio
async def test_slug_generation_exhausted_after_ten_lookups(blog: BlogRepository) -> None:
    for _ in range(10):
        await blog.create_post(_post("Crowded"))

    posts = await blog.list_posts(only_published=False)
    assert {p.slug for p in posts} == {"crowded"} | {f"crowded-{i}" for i in range(1, 10)}

    with pytest.raises(SlugGenerationExhausted) as exc_info:
        await blog.create_post(_post("Crowded"))
    assert "change the title" in exc_info.value.message
    assert exc_info.value.details == {"slug": "crowded", "attempts": 10}
    assert len(await blog.list_posts(only_published=False)) == 10


@pytest.mark.asyncio
async def test_untitled_post_gets_timestamp_slug(
    blog: BlogRepository, clock: TickingClock
) -> None:
    post = await blog.create_post(_post(""))
    assert post.slug == f"post-{int(clock.now.timestamp() * 1000)}"


@pytest.mark.asyncio
async def test_excerpt_defaults_to_start_of_content(blog: BlogRepository) -> None:
    long_post = await blog.create_post(_post("Long", content="x" * 300))
    short_post = await blog.create_post(_post("Short", content="tiny"))
    custom = await blog.create_post(_post("Custom", content="y" * 300, excerpt="Hand written"))

    assert long_post.excerpt == "x" * 200 + "..."
    assert short_post.excerpt == "tiny"
    assert custom.excerpt == "Hand written"


@pytest.mark.asyncio
async def test_get_by_slug(blog: BlogRepository) -> None:
    post = await blog.create_post(_post("Find Me"))
    assert await blog.get_by_slug("find-me") == post
    assert await blog.get_by_slug("does-not-exist") is None
    assert await blog.get_by_slug("") is None


@pytest.mark.asyncio
async def test_list_posts_newest_first_and_published_only(blog: BlogRepository) -> None:
    first = await blog.create_post(_post("First"))
    await blog.create_post(_post("Draft", is_published=False))
    second = await blog.create_post(_post("Second"))
    third = await blog.create_post(_post("Third"))
    assert first.published_at < second.published_at < third.published_at

    published = await blog.list_posts()
    assert [p.id for p in published] == [third.id, second.id, first.id]
    assert all(p.is_published for p in published)

    limited = await blog.list_posts(limit=1)
    assert [p.id for p in limited] == [third.id]


@pytest.mark.asyncio
async def test_list_all_posts_puts_drafts_last(blog: BlogRepository) -> None:
    await blog.create_post(_post("Draft", is_published=False))
    published = await blog.create_post(_post("Published"))

    posts = await blog.list_posts(only_published=False)
    assert [p.slug for p in posts] == [published.slug, "draft"]


@pytest.mark.asyncio
async def test_list_posts_rejects_non_positive_limit(blog: BlogRepository) -> None:
    with pytest.raises(ValidationError):
        await blog.list_posts(limit=0)


@pytest.mark.asyncio
async def test_update_keeps_slug_and_created_at_on_title_change(blog: BlogRepository) -> None:
    post = await blog.create_post(_post("Original Title"))

    updated = await blog.update_post(post.id, BlogPostPatch(title="A New Title"))

    assert updated.title == "A New Title"
    assert updated.slug == "original-title"
    assert updated.created_at == post.created_at
    assert updated.updated_at > post.updated_at

    stored = await blog.get(post.id)
    assert stored == updated


@pytest.mark.asyncio
async def test_update_with_explicit_slug_is_normalized_and_unique(blog: BlogRepository) -> None:
    await blog.create_post(_post("Taken"))
    post = await blog.create_post(_post("Other"))

    updated = await blog.update_post(post.id, BlogPostPatch(slug="Taken"))
    assert updated.slug == "taken-1"

    renamed = await blog.update_post(post.id, BlogPostPatch(slug="My Custom Slug"))
    assert renamed.slug == "my-custom-slug"


@pytest.mark.asyncio
async def test_update_clearing_slug_regenerates_from_title(blog: BlogRepository) -> None:
    post = await blog.create_post(_post("Before"))
    updated = await blog.update_post(post.id, BlogPostPatch(title="After Edit", slug=None))
    assert updated.slug == "after-edit"


@pytest.mark.asyncio
async def test_update_keeping_own_slug_does_not_add_suffix(blog: BlogRepository) -> None:
    post = await blog.create_post(_post("Mine"))
    updated = await blog.update_post(post.id, BlogPostPatch(slug="mine"))
    assert updated.slug == "mine"


@pytest.mark.asyncio
async def test_unpublish_clears_published_at(blog: BlogRepository) -> None:
    post = await blog.create_post(_post())
    draft = await blog.update_post(post.id, BlogPostPatch(is_published=False))
    assert draft.is_published is False
    assert draft.published_at is None

    stored = await blog.get(post.id)
    assert stored is not None
    assert stored.published_at is None


@pytest.mark.asyncio
async def test_publishing_a_draft_sets_published_at(
    blog: BlogRepository, clock: TickingClock
) -> None:
    post = await blog.create_post(_post(is_published=False))
    published = await blog.update_post(post.id, BlogPostPatch(is_published=True))
    assert published.published_at == clock.now


@pytest.mark.asyncio
async def test_editing_a_published_post_keeps_published_at(blog: BlogRepository) -> None:
    post = await blog.create_post(_post())
    edited = await blog.update_post(post.id, BlogPostPatch(content="Edited", is_published=True))
    assert edited.published_at == post.published_at


@pytest.mark.asyncio
async def test_update_excerpt_falls_back_to_new_content(blog: BlogRepository) -> None:
    post = await blog.create_post(_post(content="old content"))
    updated = await blog.update_post(post.id, BlogPostPatch(content="z" * 250, excerpt=None))
    assert updated.excerpt == "z" * 200 + "..."


@pytest.mark.asyncio
async def test_update_missing_post_raises_not_found(blog: BlogRepository) -> None:
    with pytest.raises(NotFoundError):
        await blog.update_post("missing", BlogPostPatch(title="x"))


@pytest.mark.asyncio
async def test_update_requires_id(blog: BlogRepository) -> None:
    with pytest.raises(ValidationError):
        await blog.update_post("", BlogPostPatch(title="x"))


def test_patch_rejects_null_title() -> None:
    with pytest.raises(ValueError):
        BlogPostPatch(title=None)


@pytest.mark.asyncio
async def test_delete_post_is_idempotent(blog: BlogRepository) -> None:
    post = await blog.create_post(_post())
    await blog.delete_post(post.id)
    await blog.delete_post(post.id)
    assert await blog.get(post.id) is None


@pytest.mark.asyncio
async def test_initialize_default_posts_only_when_empty(blog: BlogRepository) -> None:
    assert await blog.initialize_default_posts() == len(DEFAULT_BLOG_POSTS)
    assert await blog.initialize_default_posts() == 0

    posts = await blog.list_posts()
    assert len(posts) == len(DEFAULT_BLOG_POSTS)
    assert all(p.is_published and p.published_at is not None for p in posts)
    assert posts[-1].slug == "welcome-to-the-new-blog"


@pytest.mark.asyncio
async def test_republish_with_original_published_at_preserves_it(blog: BlogRepository) -> None:
    post = await blog.create_post(_post())
    republished = await blog.update_post(
        post.id, BlogPostPatch(is_published=True, published_at=post.published_at)
    )
    assert republished.published_at == post.published_at
    stored = await blog.get(post.id)
    assert stored is not None
    assert stored.published_at == post.published_at


@pytest.mark.asyncio
async def test_excerpt_for_50_and_250_character_content(blog: BlogRepository) -> None:
    short_content = "s" * 50
    long_content = "l" * 250

    short_post = await blog.create_post(_post("Fifty", content=short_content))
    long_post = await blog.create_post(_post("Two Fifty", content=long_content))

    assert short_post.excerpt == short_content
    assert long_post.excerpt == long_content[:200] + "..."


class SlugLookupOfflineStore(SqlDocumentStore):
    """Store whose slug lookups fail like a dropped connection."""

    async def query(
        self,
        collection: str,
        *,
        where: Mapping[str, FilterValue] | None = None,
        order_by: Sequence[OrderBy] = (),
        limit: int | None = None,
    ) -> list[DocumentSnapshot]:
        if where and "slug" in where:
            raise StoreUnavailable("query", collection, reason="connection reset")
        return await super().query(collection, where=where, order_by=order_by, limit=limit)


@pytest.mark.asyncio
async def test_slug_lookup_failure_is_logged_once(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    offline = SlugLookupOfflineStore.from_url(
        f"sqlite+aiosqlite:///{(tmp_path / 'slug.db').as_posix()}"
    )
    await offline.create_schema()
    try:
        with caplog.at_level(logging.ERROR), pytest.raises(StoreUnavailable):
            await BlogRepository(offline).create_post(_post("Offline"))
    finally:
        await offline.close()

    failures = [r for r in caplog.records if r.levelno >= logging.ERROR]
    assert len(failures) == 1
    assert "create_post" in failures[0].getMessage()
