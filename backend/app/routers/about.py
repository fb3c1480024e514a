"""About profile API router and the public landing endpoint."""

from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile
from sqlalchemy.orm import Session

from app.database import get_db
from app.middleware.auth_middleware import get_current_admin
from app.schemas.about import AboutOut
from app.schemas.auth import AdminOut
from app.services import about_service
from app.services.relation_service import parse_id_list
from app.services.storage_service import LocalFileStorage, get_storage

router = APIRouter(tags=["about"])


def _relation_ids(skill_ids, sosmed_ids, project_ids, work_experience_ids) -> dict:
    return {
        "skills": parse_id_list(skill_ids, "skill_ids"),
        "sosmed": parse_id_list(sosmed_ids, "sosmed_ids"),
        "projects": parse_id_list(project_ids, "project_ids"),
        "work_experiences": parse_id_list(work_experience_ids, "work_experience_ids"),
    }


@router.get("/api/landing", response_model=AboutOut)
def get_landing(db: Session = Depends(get_db)):
    return about_service.get_landing(db)


@router.get("/api/about", response_model=List[AboutOut])
def list_abouts(db: Session = Depends(get_db)):
    return about_service.list_abouts(db)


@router.get("/api/about/{about_id}", response_model=AboutOut)
def get_about(about_id: str, db: Session = Depends(get_db)):
    return about_service.get_about(db, about_id)


@router.post("/api/about", response_model=AboutOut, status_code=201)
async def create_about(
    name: Optional[str] = Form(None),
    job_title: Optional[str] = Form(None),
    introduction: Optional[str] = Form(None),
    skill_ids: Optional[str] = Form(None),
    sosmed_ids: Optional[str] = Form(None),
    project_ids: Optional[str] = Form(None),
    work_experience_ids: Optional[str] = Form(None),
    profile: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    storage: LocalFileStorage = Depends(get_storage),
    _admin: AdminOut = Depends(get_current_admin),
):
    fields = {"name": name, "job_title": job_title, "introduction": introduction}
    relation_ids = _relation_ids(skill_ids, sosmed_ids, project_ids, work_experience_ids)
    return await about_service.create_about(db, fields, profile, relation_ids, storage)


@router.put("/api/about/{about_id}", response_model=AboutOut)
async def update_about(
    about_id: str,
    name: Optional[str] = Form(None),
    job_title: Optional[str] = Form(None),
    introduction: Optional[str] = Form(None),
    skill_ids: Optional[str] = Form(None),
    sosmed_ids: Optional[str] = Form(None),
    project_ids: Optional[str] = Form(None),
    work_experience_ids: Optional[str] = Form(None),
    profile: Optional[UploadFile] = File(None),
    profile_deleted: bool = Form(False),
    db: Session = Depends(get_db),
    storage: LocalFileStorage = Depends(get_storage),
    _admin: AdminOut = Depends(get_current_admin),
):
    fields = {"name": name, "job_title": job_title, "introduction": introduction}
    relation_ids = _relation_ids(skill_ids, sosmed_ids, project_ids, work_experience_ids)
    return await about_service.update_about(
        db, about_id, fields, profile, profile_deleted, relation_ids, storage
    )


@router.delete("/api/about/{about_id}")
def delete_about(
    about_id: str,
    db: Session = Depends(get_db),
    storage: LocalFileStorage = Depends(get_storage),
    _admin: AdminOut = Depends(get_current_admin),
):
    about_service.delete_about(db, about_id, storage)
    return {"message": "About profile deleted."}
