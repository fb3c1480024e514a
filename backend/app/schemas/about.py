"""About profile and landing page response schemas."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from app.schemas.project import ProjectOut
from app.schemas.skill import SkillOut, SosmedOut
from app.schemas.work_experience import WorkExperienceOut


class AboutOut(BaseModel):
    id: str
    name: str
    job_title: str
    introduction: str
    profile_picture: Optional[str] = None
    skills: List[SkillOut] = Field(default_factory=list)
    sosmed: List[SosmedOut] = Field(default_factory=list)
    projects: List[ProjectOut] = Field(default_factory=list)
    work_experiences: List[WorkExperienceOut] = Field(default_factory=list)
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
