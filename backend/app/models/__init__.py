"""SQLAlchemy model package."""

from app.models.skill import Skill, Sosmed
from app.models.work_experience import WorkExperience
from app.models.project import Project
from app.models.about import About

__all__ = [
    "Skill", "Sosmed",
    "WorkExperience",
    "Project",
    "About",
]
