"""FastAPI application entry point for the portfolio content API."""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from portfolio_cms.api.routes import (
    admin,
    blog,
    contact,
    experiences,
    health,
    home,
    profile,
    projects,
    skills,
)
from portfolio_cms.api.schemas.common import ErrorResponse
from portfolio_cms.errors import (
    NotFoundError,
    PortfolioError,
    SlugGenerationExhausted,
    StoreUnavailable,
    ValidationError,
)

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

logger = logging.getLogger(__name__)

STORE_UNAVAILABLE_MESSAGE = "Failed to load or save content"


def seed_on_startup() -> bool:
    """Return False when PORTFOLIO_SEED_ON_STARTUP disables startup seeding."""
    value = os.getenv("PORTFOLIO_SEED_ON_STARTUP", "true")
    return value.strip().lower() not in {"0", "false", "no", "off"}


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Open the document store on startup, seed it and close it on shutdown."""
    from portfolio_cms.data.store import SqlDocumentStore
    from portfolio_cms.services import initialize_all

    store = SqlDocumentStore.from_url()
    await store.create_schema()
    if seed_on_startup():
        report = await initialize_all(store)
        if not report.ok:
            logger.warning("Startup seeding incomplete for: %s", ", ".join(sorted(report.failed)))
    app.state.store = store
    try:
        yield
    finally:
        await store.close()


app = FastAPI(
    title="Portfolio CMS API",
    description="Content API for a personal portfolio site and its blog",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _error_response(status_code: int, detail: str, exc: PortfolioError) -> JSONResponse:
    body = ErrorResponse(detail=detail, details=exc.details)
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


@app.exception_handler(StoreUnavailable)
async def store_unavailable_handler(request: Request, exc: StoreUnavailable) -> JSONResponse:
    """Hide transport details behind a generic message."""
    logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content=ErrorResponse(detail=STORE_UNAVAILABLE_MESSAGE).model_dump(mode="json"),
    )


@app.exception_handler(SlugGenerationExhausted)
async def slug_exhausted_handler(request: Request, exc: SlugGenerationExhausted) -> JSONResponse:
    return _error_response(status.HTTP_409_CONFLICT, exc.message, exc)


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return _error_response(status.HTTP_404_NOT_FOUND, exc.message, exc)


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return _error_response(status.HTTP_400_BAD_REQUEST, exc.message, exc)


app.include_router(health.router)
app.include_router(home.router, prefix="/api")
app.include_router(profile.router, prefix="/api")
app.include_router(profile.admin_router, prefix="/api")
app.include_router(skills.router, prefix="/api")
app.include_router(skills.admin_router, prefix="/api")
app.include_router(experiences.router, prefix="/api")
app.include_router(experiences.admin_router, prefix="/api")
app.include_router(projects.router, prefix="/api")
app.include_router(projects.admin_router, prefix="/api")
app.include_router(blog.router, prefix="/api")
app.include_router(blog.admin_router, prefix="/api")
app.include_router(contact.router, prefix="/api")
app.include_router(admin.router, prefix="/api")


def main(host: str = "0.0.0.0", port: int = 8000, reload: bool = False) -> None:
    """Start the API server."""
    import uvicorn

    uvicorn.run(
        "portfolio_cms.api.main:app",
        host=host,
        port=port,
        reload=reload,
    )


if __name__ == "__main__":
    main()
