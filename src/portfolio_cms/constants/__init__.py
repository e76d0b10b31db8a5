from __future__ import annotations

from portfolio_cms.constants.collections import (
    BLOG_POSTS_COLLECTION,
    CONTACT_MESSAGES_COLLECTION,
    EXCERPT_ELLIPSIS,
    EXCERPT_LENGTH,
    EXPERIENCES_COLLECTION,
    PROFILE_COLLECTION,
    PROFILE_DOCUMENT_ID,
    PROJECTS_COLLECTION,
    SKILLS_COLLECTION,
    SLUG_MAX_ATTEMPTS,
)
from portfolio_cms.constants.skill_categories import SkillCategory

__all__ = [
    "BLOG_POSTS_COLLECTION",
    "CONTACT_MESSAGES_COLLECTION",
    "EXCERPT_ELLIPSIS",
    "EXCERPT_LENGTH",
    "EXPERIENCES_COLLECTION",
    "PROFILE_COLLECTION",
    "PROFILE_DOCUMENT_ID",
    "PROJECTS_COLLECTION",
    "SKILLS_COLLECTION",
    "SLUG_MAX_ATTEMPTS",
    "SkillCategory",
]
