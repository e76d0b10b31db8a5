"""Experience routes: public timeline and admin CRUD."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from portfolio_cms.api.dependencies import get_experience_repository, require_admin
from portfolio_cms.models import Experience, ExperiencePatch
from portfolio_cms.services import ExperienceRepository

router = APIRouter(tags=["experiences"])
admin_router = APIRouter(
    prefix="/admin", tags=["experiences"], dependencies=[Depends(require_admin)]
)

ExperienceRepo = Annotated[ExperienceRepository, Depends(get_experience_repository)]


@router.get("/experiences", response_model=list[Experience])
async def list_experiences(repo: ExperienceRepo) -> list[Experience]:
    """List experiences, most recent start date first."""
    return await repo.list()


@admin_router.post(
    "/experiences", response_model=Experience, status_code=status.HTTP_201_CREATED
)
async def create_experience(data: Experience, repo: ExperienceRepo) -> Experience:
    """Create an experience entry. ``end_date`` is cleared when ``current`` is set."""
    return await repo.create(data)


@admin_router.patch("/experiences/{experience_id}", response_model=Experience)
async def update_experience(
    experience_id: Annotated[str, Path(description="Experience ID")],
    data: ExperiencePatch,
    repo: ExperienceRepo,
) -> Experience:
    """Update an experience entry. Only provided fields are updated."""
    return await repo.update(experience_id, data)


@admin_router.delete("/experiences/{experience_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_experience(
    experience_id: Annotated[str, Path(description="Experience ID")],
    repo: ExperienceRepo,
) -> None:
    """Delete an experience entry."""
    await repo.delete(experience_id)
