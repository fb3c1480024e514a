"""Request/response schemas for skills and social media links."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class SkillBase(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    icon: str = Field(min_length=1, max_length=500)


class SkillCreate(SkillBase):
    pass


class SkillUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    icon: Optional[str] = Field(default=None, min_length=1, max_length=500)


class SkillOut(SkillBase):
    id: str

    model_config = {"from_attributes": True}


class SkillDetailOut(SkillOut):
    created_at: datetime
    updated_at: Optional[datetime] = None


class SosmedBase(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    url: str = Field(min_length=1, max_length=500)


class SosmedCreate(SosmedBase):
    pass


class SosmedUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    url: Optional[str] = Field(default=None, min_length=1, max_length=500)


class SosmedOut(SosmedBase):
    id: str

    model_config = {"from_attributes": True}
