"""Closed set of skill categories shown on the skills section."""

from __future__ import annotations

from enum import StrEnum


class SkillCategory(StrEnum):
    """Display category of a skill. Values are stored verbatim."""

    LANGUAGE = "Programming Languages"
    FRAMEWORK = "Frameworks & Technologies"
    DATABASE = "Databases"
    TOOL = "Tools"
    TESTING = "Testing & Quality"
    OTHER = "Other"
