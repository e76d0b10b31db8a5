"""Profile routes: public read and admin edits."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from portfolio_cms.api.dependencies import get_profile_repository, require_admin
from portfolio_cms.models import Profile, ProfilePatch
from portfolio_cms.services import ProfileRepository

router = APIRouter(tags=["profile"])
admin_router = APIRouter(prefix="/admin", tags=["profile"], dependencies=[Depends(require_admin)])

ProfileRepo = Annotated[ProfileRepository, Depends(get_profile_repository)]


@router.get("/profile", response_model=Profile)
async def get_profile(repo: ProfileRepo) -> Profile:
    """Return the owner profile."""
    profile = await repo.get()
    if profile is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Profile not found",
        )
    return profile


@admin_router.put("/profile", response_model=Profile)
async def save_profile(data: Profile, repo: ProfileRepo) -> Profile:
    """Merge a full profile record."""
    return await repo.save(data)


@admin_router.patch("/profile", response_model=Profile)
async def update_profile(data: ProfilePatch, repo: ProfileRepo) -> Profile:
    """Update the profile. Only provided fields are updated."""
    return await repo.update(data)
