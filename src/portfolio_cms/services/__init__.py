"""Content repositories and the startup seeding orchestrator."""

from portfolio_cms.services.base import EntityRepository
from portfolio_cms.services.blog import BlogRepository
from portfolio_cms.services.contact import ContactRepository
from portfolio_cms.services.experience import ExperienceRepository
from portfolio_cms.services.initialization import InitializationReport, initialize_all
from portfolio_cms.services.profile import ProfileRepository
from portfolio_cms.services.projects import ProjectRepository
from portfolio_cms.services.skills import SkillRepository

__all__ = [
    "BlogRepository",
    "ContactRepository",
    "EntityRepository",
    "ExperienceRepository",
    "InitializationReport",
    "ProfileRepository",
    "ProjectRepository",
    "SkillRepository",
    "initialize_all",
]
