"""Project response schemas. Project writes arrive as multipart forms, see app.routers.projects."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from app.schemas.skill import SkillOut


class ProjectSummaryOut(BaseModel):
    id: str
    title: str
    slug: str
    tagline: str
    category: str
    thumbnail: Optional[str] = None
    skills: List[SkillOut] = Field(default_factory=list)

    model_config = {"from_attributes": True}


class ProjectOut(ProjectSummaryOut):
    description: str
    features: List[str] = Field(default_factory=list)
    libraries: List[str] = Field(default_factory=list)
    background: str
    solution: str
    challenge: str
    business_impact: Optional[str] = None
    github_url: Optional[str] = None
    live_url: Optional[str] = None
    gallery: List[str] = Field(default_factory=list)
    created_at: datetime
    updated_at: Optional[datetime] = None
