"""Blog routes: the public blog and the admin post editor."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status

from portfolio_cms.api.dependencies import get_blog_repository, require_admin
from portfolio_cms.api.schemas.common import DEFAULT_POST_LIMIT, MAX_POST_LIMIT
from portfolio_cms.models import BlogPost, BlogPostCreate, BlogPostPatch
from portfolio_cms.services import BlogRepository

router = APIRouter(prefix="/blog", tags=["blog"])
admin_router = APIRouter(
    prefix="/admin/blog", tags=["blog"], dependencies=[Depends(require_admin)]
)

BlogRepo = Annotated[BlogRepository, Depends(get_blog_repository)]


@router.get("/posts", response_model=list[BlogPost])
async def list_published_posts(
    repo: BlogRepo,
    limit: Annotated[
        int, Query(ge=1, le=MAX_POST_LIMIT, description="Maximum number of posts")
    ] = DEFAULT_POST_LIMIT,
) -> list[BlogPost]:
    """List published posts, newest first."""
    return await repo.list_posts(limit=limit, only_published=True)


@router.get("/posts/{slug}", response_model=BlogPost)
async def get_post_by_slug(
    slug: Annotated[str, Path(description="Post slug")],
    repo: BlogRepo,
) -> BlogPost:
    """Return a published post by slug. Drafts are not visible here."""
    post = await repo.get_by_slug(slug)
    if post is None or not post.is_published:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Post '{slug}' not found",
        )
    return post


@admin_router.get("/posts", response_model=list[BlogPost])
async def list_all_posts(repo: BlogRepo) -> list[BlogPost]:
    """List every post including drafts. Drafts come last."""
    return await repo.list_posts(only_published=False)


@admin_router.post("/posts", response_model=BlogPost, status_code=status.HTTP_201_CREATED)
async def create_post(data: BlogPostCreate, repo: BlogRepo) -> BlogPost:
    """Create a post. The slug, excerpt and timestamps are computed."""
    return await repo.create_post(data)


@admin_router.patch("/posts/{post_id}", response_model=BlogPost)
async def update_post(
    post_id: Annotated[str, Path(description="Post ID")],
    data: BlogPostPatch,
    repo: BlogRepo,
) -> BlogPost:
    """Update a post. Only provided fields are updated.

    Send ``"slug": null`` to regenerate the slug from the title.
    """
    return await repo.update_post(post_id, data)


@admin_router.delete("/posts/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(
    post_id: Annotated[str, Path(description="Post ID")],
    repo: BlogRepo,
) -> None:
    await repo.delete_post(post_id)
