"""Route handlers for the API."""

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

__all__ = [
    "admin",
    "blog",
    "contact",
    "experiences",
    "health",
    "home",
    "profile",
    "projects",
    "skills",
]
