"""Profile model: the single owner record shown on the home and about pages."""

from __future__ import annotations

from typing import ClassVar

from portfolio_cms.models.base import ContentModel, ContentPatch


class Profile(ContentModel):
    """Owner profile. Exactly one document exists (id ``main``)."""

    name: str
    title: str
    location: str
    phone: str
    email: str
    linkedin: str
    bio: str
    objective: str
    photo_url: str | None = None


class ProfilePatch(ContentPatch):
    """Partial profile update."""

    nullable_fields: ClassVar[frozenset[str]] = frozenset({"photo_url"})

    name: str | None = None
    title: str | None = None
    location: str | None = None
    phone: str | None = None
    email: str | None = None
    linkedin: str | None = None
    bio: str | None = None
    objective: str | None = None
    photo_url: str | None = None
