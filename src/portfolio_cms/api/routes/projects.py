"""Project routes: public showcase and admin CRUD."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from portfolio_cms.api.dependencies import get_project_repository, require_admin
from portfolio_cms.models import Project, ProjectPatch
from portfolio_cms.services import ProjectRepository

router = APIRouter(tags=["projects"])
admin_router = APIRouter(prefix="/admin", tags=["projects"], dependencies=[Depends(require_admin)])

ProjectRepo = Annotated[ProjectRepository, Depends(get_project_repository)]


@router.get("/projects", response_model=list[Project])
async def list_projects(repo: ProjectRepo) -> list[Project]:
    """List projects in display order: featured first, then by order."""
    return await repo.list_for_display()


@admin_router.post("/projects", response_model=Project, status_code=status.HTTP_201_CREATED)
async def create_project(data: Project, repo: ProjectRepo) -> Project:
    """Create a project."""
    return await repo.create(data)


@admin_router.patch("/projects/{project_id}", response_model=Project)
async def update_project(
    project_id: Annotated[str, Path(description="Project ID")],
    data: ProjectPatch,
    repo: ProjectRepo,
) -> Project:
    """Update a project. Only provided fields are updated."""
    return await repo.update(project_id, data)


@admin_router.delete("/projects/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project(
    project_id: Annotated[str, Path(description="Project ID")],
    repo: ProjectRepo,
) -> None:
    """Delete a project."""
    await repo.delete(project_id)
