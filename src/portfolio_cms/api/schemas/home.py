"""Pydantic schemas for the home page endpoint."""

from __future__ import annotations

from pydantic import BaseModel, Field

from portfolio_cms.models import Experience, Profile, Project, Skill


class HomeResponse(BaseModel):
    """Everything the home page renders, fetched in one round trip."""

    profile: Profile | None = None
    skills: list[Skill] = Field(default_factory=list)
    experiences: list[Experience] = Field(default_factory=list)
    projects: list[Project] = Field(default_factory=list)
    degraded: bool = Field(
        False, description="True when content could not be loaded and the page shows empty state"
    )
