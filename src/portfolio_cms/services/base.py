"""Generic repository over one collection of uniform documents.

``EntityRepository`` gives skills, experiences and projects the same CRUD
contract: ordered listing, create with a store-assigned id, merge-update of
the fields set on a patch, idempotent delete and default seeding.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping, Sequence
from contextlib import contextmanager
from typing import Any, ClassVar, Generic, TypeVar

import pydantic

from portfolio_cms.data.store import DocumentSnapshot, DocumentStore, OrderBy
from portfolio_cms.errors import NotFoundError, PortfolioError, ValidationError
from portfolio_cms.models.base import ContentModel, ContentPatch

logger = logging.getLogger(__name__)

__all__ = ["EntityRepository", "logged_failure", "require_id", "validate_model"]

ModelT = TypeVar("ModelT", bound=ContentModel)
PatchT = TypeVar("PatchT", bound=ContentPatch)
ValidatedT = TypeVar("ValidatedT", bound=pydantic.BaseModel)


@contextmanager
def logged_failure(
    log: logging.Logger, operation: str, collection: str, target: str | None = None
) -> Iterator[None]:
    """Log any content error with its context, then let it propagate."""
    try:
        yield
    except (NotFoundError, ValidationError) as exc:
        log.warning("%s on %s (target=%s) rejected: %s", operation, collection, target, exc)
        raise
    except PortfolioError:
        log.exception("%s on %s (target=%s) failed", operation, collection, target)
        raise


def require_id(doc_id: str | None, operation: str) -> str:
    """Reject empty ids before any store call is attempted."""
    if not doc_id or not doc_id.strip():
        raise ValidationError(f"{operation} requires a document id")
    return doc_id


def validate_model(model: type[ValidatedT], data: Mapping[str, Any]) -> ValidatedT:
    """Validate *data* as *model*, reporting failures as ``ValidationError``."""
    try:
        return model.model_validate(data)
    except pydantic.ValidationError as exc:
        errors = exc.errors(include_url=False, include_context=False)
        raise ValidationError(
            f"Invalid {model.__name__} data", details={"errors": errors}
        ) from exc


class EntityRepository(Generic[ModelT, PatchT]):
    """CRUD access to one collection of uniform records.

    Subclasses set ``collection``, ``model``, the listing ``order_by`` and the
    ``defaults`` used to seed an empty collection.
    """

    collection: ClassVar[str]
    model: ClassVar[type[ContentModel]]
    order_by: ClassVar[tuple[OrderBy, ...]] = ()
    defaults: ClassVar[Sequence[Mapping[str, Any]]] = ()

    def __init__(self, store: DocumentStore) -> None:
        self.store = store

    def _from_snapshot(self, snapshot: DocumentSnapshot) -> ModelT:
        return self.model.model_validate(snapshot.to_dict())

    def _prepare_changes(
        self, changes: dict[str, Any], existing: Mapping[str, Any]
    ) -> dict[str, Any]:
        """Hook to adjust or reject patch fields before they are merged."""
        return changes

    async def list(self) -> list[ModelT]:
        """Return every document in listing order. Empty collection gives ``[]``."""
        with logged_failure(logger, "list", self.collection):
            snapshots = await self.store.query(self.collection, order_by=self.order_by)
        return [self._from_snapshot(s) for s in snapshots]

    async def get(self, entity_id: str) -> ModelT | None:
        """Return the document with *entity_id*, or None if absent."""
        require_id(entity_id, "get")
        with logged_failure(logger, "get", self.collection, entity_id):
            snapshot = await self.store.get(self.collection, entity_id)
        if snapshot is None:
            return None
        return self._from_snapshot(snapshot)

    async def create(self, entity: ModelT) -> ModelT:
        """Persist *entity* under a new store-assigned id and return it with the id."""
        with logged_failure(logger, "create", self.collection):
            doc_id = await self.store.add(self.collection, entity.to_document())
        logger.debug("Created %s/%s", self.collection, doc_id)
        return entity.model_copy(update={"id": doc_id})

    async def update(self, entity_id: str, patch: PatchT) -> ModelT:
        """Merge the fields set on *patch* into the document at *entity_id*.

        Fields not set on the patch are left untouched.

        Raises:
            ValidationError: If the id is empty or the merged record is invalid.
            NotFoundError: If no document exists at *entity_id*.
        """
        require_id(entity_id, "update")
        with logged_failure(logger, "update", self.collection, entity_id):
            existing = await self.store.get(self.collection, entity_id)
            if existing is None:
                raise NotFoundError(self.collection, entity_id)

            changes = self._prepare_changes(patch.to_document(), existing.data)
            merged = validate_model(self.model, {**existing.data, **changes, "id": entity_id})
            if changes:
                await self.store.set(self.collection, entity_id, changes, merge=True)
        return merged

    async def delete(self, entity_id: str) -> None:
        """Remove the document. Deleting a missing id is not an error."""
        require_id(entity_id, "delete")
        with logged_failure(logger, "delete", self.collection, entity_id):
            await self.store.delete(self.collection, entity_id)

    async def initialize_if_empty(self) -> int:
        """Seed the default documents when the collection is empty.

        Returns:
            Number of inserted documents (0 when the collection has data).
        """
        with logged_failure(logger, "initialize", self.collection):
            if await self.store.query(self.collection, limit=1):
                logger.debug("%s already has data, skipping seed", self.collection)
                return 0

            logger.info("Seeding %d default documents into %s", len(self.defaults), self.collection)
            for data in self.defaults:
                await self.create(validate_model(self.model, data))
        return len(self.defaults)
