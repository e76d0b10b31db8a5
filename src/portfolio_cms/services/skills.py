"""Skill repository: the skills section and its admin editor."""

from __future__ import annotations

import logging

from portfolio_cms.constants.collections import SKILLS_COLLECTION
from portfolio_cms.constants.seed_data import DEFAULT_SKILLS
from portfolio_cms.constants.skill_categories import SkillCategory
from portfolio_cms.data.store import OrderBy
from portfolio_cms.models.skill import Skill, SkillPatch
from portfolio_cms.services.base import EntityRepository, logged_failure

logger = logging.getLogger(__name__)

__all__ = ["SkillRepository"]


class SkillRepository(EntityRepository[Skill, SkillPatch]):
    """Skills listed by ascending ``order``; ties keep insertion order."""

    collection = SKILLS_COLLECTION
    model = Skill
    order_by = (OrderBy("order"),)
    defaults = DEFAULT_SKILLS

    async def list_by_category(self, category: SkillCategory) -> list[Skill]:
        """Return the skills of one category in listing order."""
        with logged_failure(logger, "list_by_category", self.collection, category.value):
            snapshots = await self.store.query(
                self.collection,
                where={"category": category.value},
                order_by=self.order_by,
            )
        return [self._from_snapshot(s) for s in snapshots]

    async def list_featured(self) -> list[Skill]:
        """Return the skills flagged as featured."""
        with logged_failure(logger, "list_featured", self.collection):
            snapshots = await self.store.query(
                self.collection, where={"featured": True}, order_by=self.order_by
            )
        return [self._from_snapshot(s) for s in snapshots]
