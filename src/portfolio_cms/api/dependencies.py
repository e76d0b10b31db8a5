"""Shared dependencies for API routes."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Header, HTTPException, Request, status

from portfolio_cms.data.store import DocumentStore
from portfolio_cms.services import (
    BlogRepository,
    ContactRepository,
    ExperienceRepository,
    ProfileRepository,
    ProjectRepository,
    SkillRepository,
)


def get_store(request: Request) -> DocumentStore:
    """Return the store created by the application lifespan."""
    return request.app.state.store


StoreDep = Annotated[DocumentStore, Depends(get_store)]


def get_profile_repository(store: StoreDep) -> ProfileRepository:
    return ProfileRepository(store)


def get_skill_repository(store: StoreDep) -> SkillRepository:
    return SkillRepository(store)


def get_experience_repository(store: StoreDep) -> ExperienceRepository:
    return ExperienceRepository(store)


def get_project_repository(store: StoreDep) -> ProjectRepository:
    return ProjectRepository(store)


def get_blog_repository(store: StoreDep) -> BlogRepository:
    return BlogRepository(store)


def get_contact_repository(store: StoreDep) -> ContactRepository:
    return ContactRepository(store)


def require_admin(
    x_admin_user: Annotated[
        str | None,
        Header(
            description=(
                "Authenticated admin user. Set by the authentication layer "
                "in front of the admin routes."
            )
        ),
    ] = None,
) -> str:
    """Gate admin routes behind an authenticated session.

    NOTE: Session handling lives in the external authentication layer, which
    forwards the signed-in user in the X-Admin-User header. The repositories
    trust every caller that gets past this check.

    Args:
        x_admin_user: Admin user from the X-Admin-User header.

    Returns:
        str: Authenticated admin user.

    Raises:
        HTTPException: If authentication is missing (401).
    """
    if not x_admin_user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing authentication. Please sign in to the admin area.",
        )
    return x_admin_user
