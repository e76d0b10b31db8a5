"""Experience model for the work history timeline."""

from __future__ import annotations

from datetime import date
from typing import ClassVar

from pydantic import Field, model_validator

from portfolio_cms.models.base import ContentModel, ContentPatch


class Experience(ContentModel):
    """A work experience entry.

    Attributes:
        start_date: First day in the role.
        end_date: Last day in the role, None while ongoing.
        current: Whether this is the ongoing role. Forces ``end_date`` to None.
        order: Optional display order.
    """

    title: str = Field(..., min_length=1)
    company: str = Field(..., min_length=1)
    location: str = ""
    start_date: date
    end_date: date | None = None
    current: bool = False
    description: str = ""
    responsibilities: list[str] = Field(default_factory=list)
    technologies: list[str] = Field(default_factory=list)
    order: int | None = None

    @model_validator(mode="after")
    def _check_dates(self) -> Experience:
        if self.current:
            self.end_date = None
        if self.end_date is not None and self.end_date < self.start_date:
            raise ValueError("end_date cannot be before start_date")
        return self


class ExperiencePatch(ContentPatch):
    """Partial experience update."""

    nullable_fields: ClassVar[frozenset[str]] = frozenset({"end_date", "order"})

    title: str | None = Field(None, min_length=1)
    company: str | None = Field(None, min_length=1)
    location: str | None = None
    start_date: date | None = None
    end_date: date | None = None
    current: bool | None = None
    description: str | None = None
    responsibilities: list[str] | None = None
    technologies: list[str] | None = None
    order: int | None = None
