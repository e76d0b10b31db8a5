"""Pydantic schemas for the contact form endpoint."""

from __future__ import annotations

from pydantic import BaseModel


class ContactMessageCreated(BaseModel):
    """Response after a contact message has been stored."""

    id: str
