"""Startup seeding of every content collection.

``initialize_all`` makes sure the public site never renders empty: each
collection that has no documents gets its default content. The collections
are independent, so the initializers run concurrently and a failure in one
does not stop the others.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field

from portfolio_cms.data.store import DocumentStore
from portfolio_cms.services.blog import BlogRepository
from portfolio_cms.services.experience import ExperienceRepository
from portfolio_cms.services.profile import ProfileRepository
from portfolio_cms.services.projects import ProjectRepository
from portfolio_cms.services.skills import SkillRepository

logger = logging.getLogger(__name__)

__all__ = ["InitializationReport", "initialize_all"]


@dataclass(slots=True)
class InitializationReport:
    """Outcome of one ``initialize_all`` run.

    Attributes:
        inserted: Collection name -> number of seeded documents (0 if it had data).
        failed: Collection name -> error message for initializers that raised.
    """

    inserted: dict[str, int] = field(default_factory=dict)
    failed: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failed


def _initializers(store: DocumentStore) -> dict[str, Callable[[], Awaitable[int]]]:
    profile = ProfileRepository(store)
    skills = SkillRepository(store)
    experiences = ExperienceRepository(store)
    projects = ProjectRepository(store)
    blog = BlogRepository(store)
    return {
        profile.collection: profile.initialize_if_empty,
        skills.collection: skills.initialize_if_empty,
        experiences.collection: experiences.initialize_if_empty,
        projects.collection: projects.initialize_if_empty,
        blog.collection: blog.initialize_default_posts,
    }


async def initialize_all(store: DocumentStore) -> InitializationReport:
    """Seed every empty collection concurrently, best effort.

    Args:
        store: Store shared by all repositories.

    Returns:
        Per-collection inserted counts and failures. Failures are logged and
        never abort the other initializers.
    """
    initializers = _initializers(store)
    results = await asyncio.gather(
        *(initialize() for initialize in initializers.values()),
        return_exceptions=True,
    )

    report = InitializationReport()
    for collection, result in zip(initializers, results, strict=True):
        if isinstance(result, Exception):
            logger.error("Failed to initialize %s: %s", collection, result, exc_info=result)
            report.failed[collection] = str(result)
        elif isinstance(result, BaseException):
            raise result
        else:
            report.inserted[collection] = result

    logger.info(
        "Content initialization finished: inserted=%s failed=%s",
        report.inserted,
        sorted(report.failed),
    )
    return report
