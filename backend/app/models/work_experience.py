"""WorkExperience SQLAlchemy model."""

from sqlalchemy import JSON, Column, Date, DateTime, Index, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.database import Base
from app.models.associations import about_work_experience, work_experience_skill
from app.utils.helpers import new_id


class WorkExperience(Base):
    __tablename__ = "work_experience"

    id = Column(String(32), primary_key=True, default=new_id)
    position = Column(String(200), nullable=False)
    employment_type = Column(String(50), nullable=False)  # full_time/part_time/contract/internship/freelance
    company = Column(String(200), nullable=False)
    location = Column(String(200))
    location_type = Column(String(50))  # onsite/hybrid/remote
    description = Column(JSON, nullable=False, default=list)  # bullet points
    start_date = Column(Date, nullable=False)
    end_date = Column(Date)  # null = current position
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, onupdate=func.now())

    skills = relationship("Skill", secondary=work_experience_skill, back_populates="work_experiences")
    abouts = relationship("About", secondary=about_work_experience, back_populates="work_experiences")

    __table_args__ = (
        Index("idx_work_experience_start", "start_date"),
    )

    @property
    def is_current(self):
        return self.end_date is None
