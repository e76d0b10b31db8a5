"""Profile repository for the single owner profile document.

The profile is created once by seeding and afterwards only merged by the
admin profile editor. It is never deleted.
"""

from __future__ import annotations

import logging

from portfolio_cms.constants.collections import PROFILE_COLLECTION, PROFILE_DOCUMENT_ID
from portfolio_cms.constants.seed_data import DEFAULT_PROFILE
from portfolio_cms.data.store import DocumentStore
from portfolio_cms.errors import NotFoundError
from portfolio_cms.models.profile import Profile, ProfilePatch
from portfolio_cms.services.base import logged_failure, validate_model

logger = logging.getLogger(__name__)

__all__ = ["ProfileRepository"]


class ProfileRepository:
    """Read and merge the singleton profile document."""

    collection = PROFILE_COLLECTION
    document_id = PROFILE_DOCUMENT_ID

    def __init__(self, store: DocumentStore) -> None:
        self.store = store

    async def get(self) -> Profile | None:
        """Return the profile, or None before it has been seeded."""
        with logged_failure(logger, "get", self.collection, self.document_id):
            snapshot = await self.store.get(self.collection, self.document_id)
        if snapshot is None:
            return None
        return Profile.model_validate(snapshot.to_dict())

    async def save(self, profile: Profile) -> Profile:
        """Merge a full profile record into the singleton document."""
        with logged_failure(logger, "save", self.collection, self.document_id):
            await self.store.set(
                self.collection, self.document_id, profile.to_document(), merge=True
            )
        return profile.model_copy(update={"id": self.document_id})

    async def update(self, patch: ProfilePatch) -> Profile:
        """Merge only the fields set on *patch*.

        Raises:
            NotFoundError: If the profile has not been created yet.
        """
        with logged_failure(logger, "update", self.collection, self.document_id):
            snapshot = await self.store.get(self.collection, self.document_id)
            if snapshot is None:
                raise NotFoundError(self.collection, self.document_id)

            changes = patch.to_document()
            merged = validate_model(Profile, {**snapshot.to_dict(), **changes})
            if changes:
                await self.store.set(self.collection, self.document_id, changes, merge=True)
        return merged

    async def initialize_if_empty(self) -> int:
        """Save the default profile if none exists. Returns 1 if it was created."""
        if await self.get() is not None:
            return 0
        logger.info("No profile found, saving default profile")
        await self.save(validate_model(Profile, DEFAULT_PROFILE))
        return 1
