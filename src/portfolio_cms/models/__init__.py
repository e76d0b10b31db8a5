"""Content models: full records and partial-update (patch) types."""

from portfolio_cms.models.base import ContentModel, ContentPatch, Timestamp, format_timestamp
from portfolio_cms.models.blog_post import BlogPost, BlogPostCreate, BlogPostPatch
from portfolio_cms.models.contact_message import ContactMessage, ContactMessageCreate
from portfolio_cms.models.experience import Experience, ExperiencePatch
from portfolio_cms.models.profile import Profile, ProfilePatch
from portfolio_cms.models.project import Project, ProjectPatch, sort_projects_for_display
from portfolio_cms.models.skill import Skill, SkillPatch

__all__ = [
    "BlogPost",
    "BlogPostCreate",
    "BlogPostPatch",
    "ContactMessage",
    "ContactMessageCreate",
    "ContentModel",
    "ContentPatch",
    "Experience",
    "ExperiencePatch",
    "Profile",
    "ProfilePatch",
    "Project",
    "ProjectPatch",
    "Skill",
    "SkillPatch",
    "Timestamp",
    "format_timestamp",
    "sort_projects_for_display",
]
