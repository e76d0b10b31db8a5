"""ORM model for schemaless content documents.

Every entity collection (profile, skills, blog posts, ...) shares this table.
A document is a flat JSON object addressed by ``(collection, doc_id)``.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from sqlalchemy import JSON, DateTime, Index, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from portfolio_cms.data.db import Base


class DocumentRecord(Base):
    """A stored document.

    Attributes:
        pk: Auto-incrementing surrogate key. Records insertion order.
        collection: Name of the owning collection (e.g. "blog_posts").
        doc_id: Store-assigned or fixed identifier, unique per collection.
        data: Document fields as a JSON object.
        created_at: UTC timestamp when the document was first written.
        updated_at: UTC timestamp of the last write.
    """

    __tablename__ = "documents"
    __table_args__ = (
        UniqueConstraint("collection", "doc_id", name="uq_document_collection_id"),
        Index("ix_document_collection", "collection"),
    )

    pk: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    collection: Mapped[str] = mapped_column(String(128), nullable=False)
    doc_id: Mapped[str] = mapped_column(String(64), nullable=False)
    data: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False, default=dict)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(UTC),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
    )
