"""Skill and Sosmed SQLAlchemy models."""

from sqlalchemy import Column, DateTime, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.database import Base
from app.models.associations import about_skill, about_sosmed, project_skill, work_experience_skill
from app.utils.helpers import new_id


class Skill(Base):
    __tablename__ = "skill"

    id = Column(String(32), primary_key=True, default=new_id)
    name = Column(String(100), nullable=False)
    icon = Column(String(500), nullable=False)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, onupdate=func.now())

    projects = relationship("Project", secondary=project_skill, back_populates="skills")
    work_experiences = relationship("WorkExperience", secondary=work_experience_skill, back_populates="skills")
    abouts = relationship("About", secondary=about_skill, back_populates="skills")


class Sosmed(Base):
    __tablename__ = "sosmed"

    id = Column(String(32), primary_key=True, default=new_id)
    name = Column(String(100), nullable=False)
    url = Column(String(500), nullable=False)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, onupdate=func.now())

    abouts = relationship("About", secondary=about_sosmed, back_populates="sosmed")
