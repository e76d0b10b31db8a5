"""Home page route: profile, skills, experiences and projects in one call."""

from __future__ import annotations

import asyncio
import logging
from typing import Annotated

from fastapi import APIRouter, Depends

from portfolio_cms.api.dependencies import (
    get_experience_repository,
    get_profile_repository,
    get_project_repository,
    get_skill_repository,
)
from portfolio_cms.api.schemas.home import HomeResponse
from portfolio_cms.errors import StoreUnavailable
from portfolio_cms.services import (
    ExperienceRepository,
    ProfileRepository,
    ProjectRepository,
    SkillRepository,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["home"])


@router.get("/home", response_model=HomeResponse)
async def get_home(
    profiles: Annotated[ProfileRepository, Depends(get_profile_repository)],
    skills: Annotated[SkillRepository, Depends(get_skill_repository)],
    experiences: Annotated[ExperienceRepository, Depends(get_experience_repository)],
    projects: Annotated[ProjectRepository, Depends(get_project_repository)],
) -> HomeResponse:
    """Fetch all home page sections concurrently.

    Partial results are never returned: if any read fails the page gets an
    empty payload flagged as degraded.
    """
    try:
        profile, skill_list, experience_list, project_list = await asyncio.gather(
            profiles.get(),
            skills.list(),
            experiences.list(),
            projects.list_for_display(),
        )
    except StoreUnavailable:
        logger.warning("Home page content unavailable, serving empty state")
        return HomeResponse(degraded=True)

    return HomeResponse(
        profile=profile,
        skills=skill_list,
        experiences=experience_list,
        projects=project_list,
    )
