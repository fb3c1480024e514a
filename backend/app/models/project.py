"""Project SQLAlchemy model."""

from sqlalchemy import JSON, Column, DateTime, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.database import Base
from app.models.associations import about_project, project_skill
from app.utils.helpers import new_id


class Project(Base):
    __tablename__ = "project"

    id = Column(String(32), primary_key=True, default=new_id)
    title = Column(String(200), nullable=False)
    slug = Column(String(200), nullable=False, unique=True)
    tagline = Column(String(300), nullable=False)
    description = Column(Text, nullable=False)
    category = Column(String(100), nullable=False)
    features = Column(JSON, nullable=False, default=list)
    libraries = Column(JSON, nullable=False, default=list)
    background = Column(Text, nullable=False)
    solution = Column(Text, nullable=False)
    challenge = Column(Text, nullable=False)
    business_impact = Column(Text)
    github_url = Column(String(500), default="")
    live_url = Column(String(500), default="")
    thumbnail = Column(String(500))
    gallery = Column(JSON, nullable=False, default=list)  # ordered image paths
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, onupdate=func.now())

    skills = relationship("Skill", secondary=project_skill, back_populates="projects")
    abouts = relationship("About", secondary=about_project, back_populates="projects")
