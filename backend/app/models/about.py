"""About (portfolio profile) SQLAlchemy model."""

from sqlalchemy import Column, DateTime, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.database import Base
from app.models.associations import about_project, about_skill, about_sosmed, about_work_experience
from app.utils.helpers import new_id


class About(Base):
    __tablename__ = "about"

    id = Column(String(32), primary_key=True, default=new_id)
    name = Column(String(100), nullable=False)
    job_title = Column(String(200), nullable=False)
    introduction = Column(Text, nullable=False)
    profile_picture = Column(String(500))
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, onupdate=func.now())

    skills = relationship("Skill", secondary=about_skill, back_populates="abouts")
    sosmed = relationship("Sosmed", secondary=about_sosmed, back_populates="abouts")
    projects = relationship(
        "Project",
        secondary=about_project,
        back_populates="abouts",
        order_by="Project.created_at.desc()",
    )
    work_experiences = relationship(
        "WorkExperience",
        secondary=about_work_experience,
        back_populates="abouts",
        order_by="WorkExperience.start_date.desc()",
    )
