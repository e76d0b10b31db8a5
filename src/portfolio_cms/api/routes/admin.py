"""Admin maintenance routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from portfolio_cms.api.dependencies import StoreDep, require_admin
from portfolio_cms.api.schemas.admin import InitializationReportResponse
from portfolio_cms.services import initialize_all

router = APIRouter(prefix="/admin", tags=["admin"], dependencies=[Depends(require_admin)])


@router.post("/initialize", response_model=InitializationReportResponse)
async def initialize_content(store: StoreDep) -> InitializationReportResponse:
    """Seed every empty collection with default content.

    Collections that already hold data are left alone, so this is safe to
    call repeatedly.
    """
    report = await initialize_all(store)
    return InitializationReportResponse.from_report(report)
