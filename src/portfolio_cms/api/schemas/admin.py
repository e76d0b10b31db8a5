"""Pydantic schemas for admin maintenance endpoints."""

from __future__ import annotations

from pydantic import BaseModel, Field

from portfolio_cms.services import InitializationReport


class InitializationReportResponse(BaseModel):
    """Result of re-running content initialization."""

    inserted: dict[str, int] = Field(description="Seeded document count per collection")
    failed: dict[str, str] = Field(description="Error message per failed collection")
    ok: bool

    @classmethod
    def from_report(cls, report: InitializationReport) -> InitializationReportResponse:
        return cls(inserted=report.inserted, failed=report.failed, ok=report.ok)
