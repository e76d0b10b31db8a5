"""Document store boundary used by every content repository.

The repositories only rely on six primitives: get a document by id, query a
collection (equality filter, ordering, limit), add a document with a
store-assigned id, set a document (optionally merging), delete a document and
read the server clock. ``SqlDocumentStore`` implements them on top of a single
SQLAlchemy table holding JSON documents.
"""

from __future__ import annotations

import logging
import uuid
from abc import ABC, abstractmethod
from collections.abc import AsyncIterator, Callable, Mapping, Sequence
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from sqlalchemy import ColumnElement, delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from portfolio_cms.data.db import (
    create_engine,
    create_session_factory,
    create_tables,
    session_scope,
)
from portfolio_cms.data.models import DocumentRecord
from portfolio_cms.errors import StoreUnavailable

logger = logging.getLogger(__name__)

__all__ = [
    "DocumentSnapshot",
    "DocumentStore",
    "OrderBy",
    "SqlDocumentStore",
]

FilterValue = bool | int | float | str


@dataclass(frozen=True, slots=True)
class DocumentSnapshot:
    """A document read from the store.

    Attributes:
        id: Identifier of the document within its collection.
        data: Document fields, without the id.
    """

    id: str
    data: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Return the document fields with ``id`` included."""
        return {**self.data, "id": self.id}


@dataclass(frozen=True, slots=True)
class OrderBy:
    """Sort clause for ``DocumentStore.query``."""

    name: str
    descending: bool = False


class DocumentStore(ABC):
    """Interface of the external document store."""

    @abstractmethod
    async def get(self, collection: str, doc_id: str) -> DocumentSnapshot | None:
        """Return the document *doc_id* of *collection*, or None if absent."""

    @abstractmethod
    async def query(
        self,
        collection: str,
        *,
        where: Mapping[str, FilterValue] | None = None,
        order_by: Sequence[OrderBy] = (),
        limit: int | None = None,
    ) -> list[DocumentSnapshot]:
        """Return documents matching every equality filter in *where*.

        Documents missing an ordering field sort after the ones that have it,
        whatever the direction. Ties keep insertion order.
        """

    @abstractmethod
    async def add(self, collection: str, data: Mapping[str, Any]) -> str:
        """Insert *data* under a new store-assigned id and return the id."""

    @abstractmethod
    async def set(
        self,
        collection: str,
        doc_id: str,
        data: Mapping[str, Any],
        *,
        merge: bool = False,
    ) -> None:
        """Write *data* at *doc_id*; merge top-level fields when *merge* is set."""

    @abstractmethod
    async def delete(self, collection: str, doc_id: str) -> None:
        """Remove *doc_id* from *collection*. Missing documents are ignored."""

    @abstractmethod
    def server_timestamp(self) -> datetime:
        """Return the store's current time (timezone-aware UTC)."""


def _utc_now() -> datetime:
    return datetime.now(UTC)


def _json_equals(name: str, value: FilterValue) -> ColumnElement[bool]:
    """Build an equality clause on a top-level JSON field."""
    element = DocumentRecord.data[name]
    # bool first: bool is a subclass of int
    if isinstance(value, bool):
        return element.as_boolean() == value
    if isinstance(value, int):
        return element.as_integer() == value
    if isinstance(value, float):
        return element.as_float() == value
    if isinstance(value, str):
        return element.as_string() == value
    raise TypeError(f"Unsupported filter value for '{name}': {value!r}")


def _sort_documents(
    documents: list[DocumentSnapshot], order_by: Sequence[OrderBy]
) -> list[DocumentSnapshot]:
    """Stable multi-key sort; documents without a value go last for each key."""
    for order in reversed(order_by):
        present = [d for d in documents if d.data.get(order.name) is not None]
        missing = [d for d in documents if d.data.get(order.name) is None]
        present.sort(key=lambda d: d.data[order.name], reverse=order.descending)
        documents = present + missing
    return documents


def _strip_id(data: Mapping[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in data.items() if key != "id"}


class SqlDocumentStore(DocumentStore):
    """Document store backed by one SQLAlchemy table of JSON documents."""

    def __init__(
        self,
        engine: AsyncEngine,
        *,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.engine = engine
        self._session_factory = create_session_factory(engine)
        self._clock = clock or _utc_now

    @classmethod
    def from_url(
        cls,
        database_url: str | None = None,
        *,
        clock: Callable[[], datetime] | None = None,
    ) -> SqlDocumentStore:
        """Create a store for *database_url* (or the configured DB_URL)."""
        return cls(create_engine(database_url), clock=clock)

    async def create_schema(self) -> None:
        """Create the documents table if it does not exist."""
        try:
            await create_tables(self.engine)
        except (SQLAlchemyError, OSError) as exc:
            logger.exception("Failed to create document store schema")
            raise StoreUnavailable("create_schema", "*", reason=str(exc)) from exc

    async def close(self) -> None:
        """Dispose the engine and release pooled connections."""
        await self.engine.dispose()

    @asynccontextmanager
    async def _session(
        self, operation: str, collection: str, doc_id: str | None = None
    ) -> AsyncIterator[AsyncSession]:
        try:
            async with session_scope(self._session_factory) as session:
                yield session
        except (SQLAlchemyError, OSError) as exc:
            raise StoreUnavailable(operation, collection, doc_id, reason=str(exc)) from exc

    @staticmethod
    async def _find(session: AsyncSession, collection: str, doc_id: str) -> DocumentRecord | None:
        stmt = select(DocumentRecord).where(
            DocumentRecord.collection == collection,
            DocumentRecord.doc_id == doc_id,
        )
        return (await session.scalars(stmt)).first()

    async def get(self, collection: str, doc_id: str) -> DocumentSnapshot | None:
        async with self._session("get", collection, doc_id) as session:
            record = await self._find(session, collection, doc_id)
            if record is None:
                return None
            return DocumentSnapshot(id=record.doc_id, data=dict(record.data))

    async def query(
        self,
        collection: str,
        *,
        where: Mapping[str, FilterValue] | None = None,
        order_by: Sequence[OrderBy] = (),
        limit: int | None = None,
    ) -> list[DocumentSnapshot]:
        stmt = select(DocumentRecord).where(DocumentRecord.collection == collection)
        for name, value in (where or {}).items():
            stmt = stmt.where(_json_equals(name, value))
        stmt = stmt.order_by(DocumentRecord.pk)
        if limit is not None and not order_by:
            stmt = stmt.limit(limit)

        logger.debug(
            "Querying %s where=%s order_by=%s limit=%s", collection, where, order_by, limit
        )
        async with self._session("query", collection) as session:
            records = (await session.scalars(stmt)).all()
            documents = [DocumentSnapshot(id=r.doc_id, data=dict(r.data)) for r in records]

        documents = _sort_documents(documents, order_by)
        if limit is not None:
            documents = documents[:limit]
        return documents

    async def add(self, collection: str, data: Mapping[str, Any]) -> str:
        doc_id = uuid.uuid4().hex
        async with self._session("add", collection, doc_id) as session:
            session.add(DocumentRecord(collection=collection, doc_id=doc_id, data=_strip_id(data)))
        return doc_id

    async def set(
        self,
        collection: str,
        doc_id: str,
        data: Mapping[str, Any],
        *,
        merge: bool = False,
    ) -> None:
        fields = _strip_id(data)
        try:
            async with self._session("set", collection, doc_id) as session:
                await self._write(session, collection, doc_id, fields, merge)
        except StoreUnavailable as exc:
            if not isinstance(exc.__cause__, IntegrityError):
                raise
            # A concurrent writer inserted the document first; write on top of it.
            logger.debug("Insert race on %s/%s, retrying as update", collection, doc_id)
            async with self._session("set", collection, doc_id) as session:
                await self._write(session, collection, doc_id, fields, merge)

    async def _write(
        self,
        session: AsyncSession,
        collection: str,
        doc_id: str,
        fields: dict[str, Any],
        merge: bool,
    ) -> None:
        record = await self._find(session, collection, doc_id)
        if record is None:
            session.add(DocumentRecord(collection=collection, doc_id=doc_id, data=fields))
        elif merge:
            # Reassign so the JSON column is flagged dirty.
            record.data = {**record.data, **fields}
        else:
            record.data = fields

    async def delete(self, collection: str, doc_id: str) -> None:
        async with self._session("delete", collection, doc_id) as session:
            await session.execute(
                delete(DocumentRecord).where(
                    DocumentRecord.collection == collection,
                    DocumentRecord.doc_id == doc_id,
                )
            )

    def server_timestamp(self) -> datetime:
        return self._clock()
