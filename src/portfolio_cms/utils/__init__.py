"""Utility functions and helpers"""

from portfolio_cms.utils.text import default_excerpt, generate_slug

__all__ = [
    "default_excerpt",
    "generate_slug",
]
