"""Social media link API router."""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.middleware.auth_middleware import get_current_admin
from app.schemas.auth import AdminOut
from app.schemas.skill import SosmedCreate, SosmedOut, SosmedUpdate
from app.services import skill_service

router = APIRouter(prefix="/api/sosmed", tags=["sosmed"])


@router.get("", response_model=List[SosmedOut])
def list_sosmed(db: Session = Depends(get_db)):
    return skill_service.list_sosmed(db)


@router.get("/{sosmed_id}", response_model=SosmedOut)
def get_sosmed(sosmed_id: str, db: Session = Depends(get_db)):
    return skill_service.get_sosmed(db, sosmed_id)


@router.post("", response_model=SosmedOut, status_code=201)
def create_sosmed(
    data: SosmedCreate,
    db: Session = Depends(get_db),
    _admin: AdminOut = Depends(get_current_admin),
):
    return skill_service.create_sosmed(db, data)


@router.put("/{sosmed_id}", response_model=SosmedOut)
def update_sosmed(
    sosmed_id: str,
    data: SosmedUpdate,
    db: Session = Depends(get_db),
    _admin: AdminOut = Depends(get_current_admin),
):
    return skill_service.update_sosmed(db, sosmed_id, data)


@router.delete("/{sosmed_id}")
def delete_sosmed(
    sosmed_id: str,
    db: Session = Depends(get_db),
    _admin: AdminOut = Depends(get_current_admin),
):
    skill_service.delete_sosmed(db, sosmed_id)
    return {"message": "Social media link deleted."}
