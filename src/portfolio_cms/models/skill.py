"""Skill model."""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field

from portfolio_cms.constants.skill_categories import SkillCategory
from portfolio_cms.models.base import ContentModel, ContentPatch


class Skill(ContentModel):
    """A technical skill with a proficiency between 0 and 100."""

    name: str = Field(..., min_length=1)
    category: SkillCategory
    proficiency: int = Field(..., ge=0, le=100)
    icon: str | None = None
    color: str | None = None
    featured: bool = False
    order: int | None = Field(None, description="Display order (ascending)")


class SkillPatch(ContentPatch):
    """Partial skill update."""

    nullable_fields: ClassVar[frozenset[str]] = frozenset({"icon", "color", "order"})

    name: str | None = Field(None, min_length=1)
    category: SkillCategory | None = None
    proficiency: int | None = Field(None, ge=0, le=100)
    icon: str | None = None
    color: str | None = None
    featured: bool | None = None
    order: int | None = None
