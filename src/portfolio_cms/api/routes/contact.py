"""Contact form route."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, status

from portfolio_cms.api.dependencies import get_contact_repository
from portfolio_cms.api.schemas.contact import ContactMessageCreated
from portfolio_cms.models import ContactMessageCreate
from portfolio_cms.services import ContactRepository

router = APIRouter(tags=["contact"])


@router.post(
    "/contact", response_model=ContactMessageCreated, status_code=status.HTTP_201_CREATED
)
async def send_contact_message(
    data: ContactMessageCreate,
    repo: Annotated[ContactRepository, Depends(get_contact_repository)],
) -> ContactMessageCreated:
    """Store a message from the public contact form."""
    message_id = await repo.save_message(data)
    return ContactMessageCreated(id=message_id)
