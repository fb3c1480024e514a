"""Skill API router. Validates requests and delegates to the service layer."""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.middleware.auth_middleware import get_current_admin
from app.schemas.auth import AdminOut
from app.schemas.skill import SkillCreate, SkillDetailOut, SkillOut, SkillUpdate
from app.services import skill_service

router = APIRouter(prefix="/api/skills", tags=["skills"])


@router.get("", response_model=List[SkillOut])
def list_skills(db: Session = Depends(get_db)):
    return skill_service.list_skills(db)


@router.get("/{skill_id}", response_model=SkillDetailOut)
def get_skill(skill_id: str, db: Session = Depends(get_db)):
    return skill_service.get_skill(db, skill_id)


@router.post("", response_model=SkillDetailOut, status_code=201)
def create_skill(
    data: SkillCreate,
    db: Session = Depends(get_db),
    _admin: AdminOut = Depends(get_current_admin),
):
    return skill_service.create_skill(db, data)


@router.put("/{skill_id}", response_model=SkillDetailOut)
def update_skill(
    skill_id: str,
    data: SkillUpdate,
    db: Session = Depends(get_db),
    _admin: AdminOut = Depends(get_current_admin),
):
    return skill_service.update_skill(db, skill_id, data)


@router.delete("/{skill_id}")
def delete_skill(
    skill_id: str,
    db: Session = Depends(get_db),
    _admin: AdminOut = Depends(get_current_admin),
):
    skill_service.delete_skill(db, skill_id)
    return {"message": "Skill deleted."}
