"""Exception taxonomy for the content repository layer.

These exceptions are independent of transport concerns. The HTTP layer maps
them to status codes in ``portfolio_cms.api.main``.
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "PortfolioError",
    "StoreUnavailable",
    "ValidationError",
    "SlugGenerationExhausted",
    "NotFoundError",
]


class PortfolioError(Exception):
    """Base exception for all portfolio content errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class StoreUnavailable(PortfolioError):
    """Raised when the document store cannot be reached or fails in transport."""

    def __init__(
        self,
        operation: str,
        collection: str,
        doc_id: str | None = None,
        reason: str | None = None,
    ) -> None:
        message = f"Document store unavailable during {operation} on '{collection}'"
        if doc_id:
            message += f" (id={doc_id})"
        if reason:
            message += f": {reason}"
        super().__init__(
            message,
            details={
                "operation": operation,
                "collection": collection,
                "doc_id": doc_id,
                "reason": reason,
            },
        )


class ValidationError(PortfolioError):
    """Raised when a caller supplies structurally invalid input."""


class SlugGenerationExhausted(PortfolioError):
    """Raised when no free slug could be found for a new blog post."""

    def __init__(self, slug: str, attempts: int) -> None:
        super().__init__(
            f"Could not find a free slug based on '{slug}' after {attempts} attempts; "
            "change the title and retry",
            details={"slug": slug, "attempts": attempts},
        )


class NotFoundError(PortfolioError):
    """Raised when an update targets a document that does not exist."""

    def __init__(self, collection: str, doc_id: str) -> None:
        super().__init__(
            f"Document '{doc_id}' not found in '{collection}'",
            details={"collection": collection, "doc_id": doc_id},
        )
