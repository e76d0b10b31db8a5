"""HTTP layer: FastAPI application, routes and request/response schemas."""
