"""Contact repository: stores messages sent from the public contact form."""

from __future__ import annotations

import logging

from portfolio_cms.constants.collections import CONTACT_MESSAGES_COLLECTION
from portfolio_cms.data.store import DocumentStore
from portfolio_cms.models.contact_message import ContactMessage, ContactMessageCreate
from portfolio_cms.services.base import logged_failure

logger = logging.getLogger(__name__)

__all__ = ["ContactRepository"]


class ContactRepository:
    """Write-only access to contact messages."""

    collection = CONTACT_MESSAGES_COLLECTION

    def __init__(self, store: DocumentStore) -> None:
        self.store = store

    async def save_message(self, data: ContactMessageCreate) -> str:
        """Store a new message stamped with the store time and ``replied=False``.

        Returns:
            The id assigned to the message.
        """
        message = ContactMessage(
            **data.model_dump(),
            created_at=self.store.server_timestamp(),
            replied=False,
        )
        with logged_failure(logger, "save_message", self.collection):
            doc_id = await self.store.add(self.collection, message.to_document())
        logger.info("Contact message %s saved", doc_id)
        return doc_id
