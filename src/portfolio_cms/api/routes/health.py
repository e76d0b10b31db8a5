"""Health check route with a document store probe."""

from __future__ import annotations

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from portfolio_cms.api.dependencies import StoreDep
from portfolio_cms.constants.collections import PROFILE_COLLECTION
from portfolio_cms.errors import StoreUnavailable

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health", response_model=None)
async def health_check(store: StoreDep) -> dict[str, str] | JSONResponse:
    """Report API status; 503 when the document store cannot be read."""
    try:
        await store.query(PROFILE_COLLECTION, limit=1)
    except StoreUnavailable as exc:
        logger.warning("Health check failed: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "unhealthy", "store": "unavailable"},
        )
    return {"status": "healthy", "store": "ok"}
