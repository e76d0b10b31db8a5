"""Contact form message models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from portfolio_cms.models.base import ContentModel, Timestamp


class ContactMessageCreate(BaseModel):
    """Fields submitted through the public contact form."""

    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3, pattern=r"^[^@\s]+@[^@\s]+$")
    subject: str = Field(..., min_length=1)
    message: str = Field(..., min_length=1)


class ContactMessage(ContentModel):
    """A stored contact message."""

    name: str
    email: str
    subject: str
    message: str
    created_at: Timestamp
    replied: bool = False
