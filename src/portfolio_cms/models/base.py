"""Shared base classes and field types for content models."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Annotated, Any, ClassVar

from pydantic import AfterValidator, BaseModel, ConfigDict, PlainSerializer, model_validator

__all__ = ["ContentModel", "ContentPatch", "Timestamp", "format_timestamp"]


def _as_utc(value: datetime) -> datetime:
    """Normalize *value* to timezone-aware UTC; naive values are taken as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def format_timestamp(value: datetime) -> str:
    """Fixed-width ISO-8601 form, so string order matches chronological order."""
    return _as_utc(value).isoformat(timespec="microseconds")


Timestamp = Annotated[
    datetime,
    AfterValidator(_as_utc),
    PlainSerializer(format_timestamp, return_type=str, when_used="json"),
]


class ContentModel(BaseModel):
    """Full record of a stored entity.

    ``id`` is absent before the first save and assigned by the store.
    """

    model_config = ConfigDict(extra="ignore")

    id: str | None = None

    def to_document(self) -> dict[str, Any]:
        """Return the JSON-ready fields to persist (the id lives outside the document)."""
        return self.model_dump(mode="json", exclude={"id"})


class ContentPatch(BaseModel):
    """Partial update: only fields explicitly set are merged into the document.

    Subclasses list the fields that may be explicitly cleared in
    ``nullable_fields``; setting any other field to null is rejected.
    """

    model_config = ConfigDict(extra="ignore")

    nullable_fields: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode="after")
    def _reject_null_required_fields(self) -> ContentPatch:
        for name in self.model_fields_set:
            if getattr(self, name) is None and name not in self.nullable_fields:
                raise ValueError(f"'{name}' cannot be null")
        return self

    def to_document(self) -> dict[str, Any]:
        """Return only the explicitly set fields, JSON-ready."""
        return self.model_dump(mode="json", exclude_unset=True)
