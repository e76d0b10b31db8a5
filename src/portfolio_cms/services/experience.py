"""Experience repository for the work history timeline."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from portfolio_cms.constants.collections import EXPERIENCES_COLLECTION
from portfolio_cms.constants.seed_data import DEFAULT_EXPERIENCES
from portfolio_cms.data.store import OrderBy
from portfolio_cms.errors import ValidationError
from portfolio_cms.models.experience import Experience, ExperiencePatch
from portfolio_cms.services.base import EntityRepository

__all__ = ["ExperienceRepository"]


class ExperienceRepository(EntityRepository[Experience, ExperiencePatch]):
    """Experiences listed newest first (descending ``start_date``)."""

    collection = EXPERIENCES_COLLECTION
    model = Experience
    order_by = (OrderBy("start_date", descending=True),)
    defaults = DEFAULT_EXPERIENCES

    def _prepare_changes(
        self, changes: dict[str, Any], existing: Mapping[str, Any]
    ) -> dict[str, Any]:
        current = changes.get("current", existing.get("current", False))
        if current and changes.get("end_date") is not None:
            raise ValidationError("end_date must be None when current is True")
        # Auto-clear end_date if current is set to True
        if changes.get("current") is True:
            changes["end_date"] = None
        return changes
