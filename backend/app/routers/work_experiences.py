"""Work experience API router. Validates requests and delegates to the service layer."""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.middleware.auth_middleware import get_current_admin
from app.schemas.auth import AdminOut
from app.schemas.work_experience import WorkExperienceCreate, WorkExperienceOut, WorkExperienceUpdate
from app.services import work_experience_service

router = APIRouter(prefix="/api/work-experiences", tags=["work-experiences"])


@router.get("", response_model=List[WorkExperienceOut])
def list_work_experiences(db: Session = Depends(get_db)):
    return work_experience_service.list_work_experiences(db)


@router.get("/{work_experience_id}", response_model=WorkExperienceOut)
def get_work_experience(work_experience_id: str, db: Session = Depends(get_db)):
    return work_experience_service.get_work_experience(db, work_experience_id)


@router.post("", response_model=WorkExperienceOut, status_code=201)
def create_work_experience(
    data: WorkExperienceCreate,
    db: Session = Depends(get_db),
    _admin: AdminOut = Depends(get_current_admin),
):
    return work_experience_service.create_work_experience(db, data)


@router.put("/{work_experience_id}", response_model=WorkExperienceOut)
def update_work_experience(
    work_experience_id: str,
    data: WorkExperienceUpdate,
    db: Session = Depends(get_db),
    _admin: AdminOut = Depends(get_current_admin),
):
    return work_experience_service.update_work_experience(db, work_experience_id, data)


@router.delete("/{work_experience_id}")
def delete_work_experience(
    work_experience_id: str,
    db: Session = Depends(get_db),
    _admin: AdminOut = Depends(get_current_admin),
):
    work_experience_service.delete_work_experience(db, work_experience_id)
    return {"message": "Work experience deleted."}
