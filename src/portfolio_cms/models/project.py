"""Project model and its display ordering."""

from __future__ import annotations

from collections.abc import Iterable
from typing import ClassVar

from pydantic import Field

from portfolio_cms.models.base import ContentModel, ContentPatch


class Project(ContentModel):
    """A portfolio project card."""

    title: str = Field(..., min_length=1)
    description: str
    image_url: str
    technologies: list[str] = Field(default_factory=list)
    live_url: str | None = None
    github_url: str | None = None
    featured: bool = False
    order: int | None = None


class ProjectPatch(ContentPatch):
    """Partial project update."""

    nullable_fields: ClassVar[frozenset[str]] = frozenset({"live_url", "github_url", "order"})

    title: str | None = Field(None, min_length=1)
    description: str | None = None
    image_url: str | None = None
    technologies: list[str] | None = None
    live_url: str | None = None
    github_url: str | None = None
    featured: bool | None = None
    order: int | None = None


def sort_projects_for_display(projects: Iterable[Project]) -> list[Project]:
    """Featured projects first, then ascending ``order``; unordered ones last.

    The sort is stable, so equal keys keep their incoming order.
    """
    return sorted(
        projects,
        key=lambda p: (not p.featured, p.order is None, p.order or 0),
    )
