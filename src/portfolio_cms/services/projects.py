"""Project repository for the projects page."""

from __future__ import annotations

from portfolio_cms.constants.collections import PROJECTS_COLLECTION
from portfolio_cms.constants.seed_data import DEFAULT_PROJECTS
from portfolio_cms.data.store import OrderBy
from portfolio_cms.models.project import Project, ProjectPatch, sort_projects_for_display
from portfolio_cms.services.base import EntityRepository

__all__ = ["ProjectRepository"]


class ProjectRepository(EntityRepository[Project, ProjectPatch]):
    """Projects stored in ascending ``order``; displayed featured first."""

    collection = PROJECTS_COLLECTION
    model = Project
    order_by = (OrderBy("order"),)
    defaults = DEFAULT_PROJECTS

    async def list_for_display(self) -> list[Project]:
        """Featured projects first, then ascending ``order`` within each group."""
        return sort_projects_for_display(await self.list())
