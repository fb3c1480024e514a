"""Many-to-many association tables linking portfolio entities."""

from sqlalchemy import Column, ForeignKey, String, Table

from app.database import Base

project_skill = Table(
    "project_skill",
    Base.metadata,
    Column("project_id", String(32), ForeignKey("project.id", ondelete="CASCADE"), primary_key=True),
    Column("skill_id", String(32), ForeignKey("skill.id", ondelete="CASCADE"), primary_key=True),
)

work_experience_skill = Table(
    "work_experience_skill",
    Base.metadata,
    Column("work_experience_id", String(32), ForeignKey("work_experience.id", ondelete="CASCADE"), primary_key=True),
    Column("skill_id", String(32), ForeignKey("skill.id", ondelete="CASCADE"), primary_key=True),
)

about_skill = Table(
    "about_skill",
    Base.metadata,
    Column("about_id", String(32), ForeignKey("about.id", ondelete="CASCADE"), primary_key=True),
    Column("skill_id", String(32), ForeignKey("skill.id", ondelete="CASCADE"), primary_key=True),
)

about_sosmed = Table(
    "about_sosmed",
    Base.metadata,
    Column("about_id", String(32), ForeignKey("about.id", ondelete="CASCADE"), primary_key=True),
    Column("sosmed_id", String(32), ForeignKey("sosmed.id", ondelete="CASCADE"), primary_key=True),
)

about_project = Table(
    "about_project",
    Base.metadata,
    Column("about_id", String(32), ForeignKey("about.id", ondelete="CASCADE"), primary_key=True),
    Column("project_id", String(32), ForeignKey("project.id", ondelete="CASCADE"), primary_key=True),
)

about_work_experience = Table(
    "about_work_experience",
    Base.metadata,
    Column("about_id", String(32), ForeignKey("about.id", ondelete="CASCADE"), primary_key=True),
    Column("work_experience_id", String(32), ForeignKey("work_experience.id", ondelete="CASCADE"), primary_key=True),
)
