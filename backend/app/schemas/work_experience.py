"""Request/response schemas for work experience entries."""

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator

from app.schemas.skill import SkillOut


class WorkExperienceBase(BaseModel):
    position: str = Field(min_length=1, max_length=200)
    employment_type: str = Field(min_length=1, max_length=50)
    company: str = Field(min_length=1, max_length=200)
    location: Optional[str] = None
    location_type: Optional[str] = None
    description: List[str] = Field(default_factory=list)
    start_date: date
    end_date: Optional[date] = None


class WorkExperienceCreate(WorkExperienceBase):
    skill_ids: List[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_period(self):
        if self.end_date and self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class WorkExperienceUpdate(BaseModel):
    position: Optional[str] = Field(default=None, min_length=1, max_length=200)
    employment_type: Optional[str] = Field(default=None, min_length=1, max_length=50)
    company: Optional[str] = Field(default=None, min_length=1, max_length=200)
    location: Optional[str] = None
    location_type: Optional[str] = None
    description: Optional[List[str]] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    # None leaves the links untouched, [] clears them
    skill_ids: Optional[List[str]] = None


class WorkExperienceOut(WorkExperienceBase):
    id: str
    is_current: bool
    skills: List[SkillOut] = Field(default_factory=list)
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
