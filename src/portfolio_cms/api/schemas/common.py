"""Shared Pydantic schemas for API responses."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

# Default and maximum number of posts on the public blog listing
DEFAULT_POST_LIMIT = 20
MAX_POST_LIMIT = 100


class ErrorResponse(BaseModel):
    """Body returned for content errors."""

    detail: str = Field(description="Human-readable error message")
    details: dict[str, Any] = Field(default_factory=dict, description="Error context")
