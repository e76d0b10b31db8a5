"""Skill routes: public listing and admin CRUD."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, status

from portfolio_cms.api.dependencies import get_skill_repository, require_admin
from portfolio_cms.constants.skill_categories import SkillCategory
from portfolio_cms.models import Skill, SkillPatch
from portfolio_cms.services import SkillRepository

router = APIRouter(tags=["skills"])
admin_router = APIRouter(prefix="/admin", tags=["skills"], dependencies=[Depends(require_admin)])

SkillRepo = Annotated[SkillRepository, Depends(get_skill_repository)]


@router.get("/skills", response_model=list[Skill])
async def list_skills(
    repo: SkillRepo,
    category: Annotated[SkillCategory | None, Query(description="Only this category")] = None,
) -> list[Skill]:
    """List skills by ascending display order."""
    if category is None:
        return await repo.list()
    return await repo.list_by_category(category)


@admin_router.post("/skills", response_model=Skill, status_code=status.HTTP_201_CREATED)
async def create_skill(data: Skill, repo: SkillRepo) -> Skill:
    """Create a skill."""
    return await repo.create(data)


@admin_router.patch("/skills/{skill_id}", response_model=Skill)
async def update_skill(
    skill_id: Annotated[str, Path(description="Skill ID")],
    data: SkillPatch,
    repo: SkillRepo,
) -> Skill:
    """Update a skill. Only provided fields are updated."""
    return await repo.update(skill_id, data)


@admin_router.delete("/skills/{skill_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_skill(
    skill_id: Annotated[str, Path(description="Skill ID")],
    repo: SkillRepo,
) -> None:
    """Delete a skill. Unknown ids are ignored."""
    await repo.delete(skill_id)
