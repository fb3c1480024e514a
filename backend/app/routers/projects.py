"""Project API router. Parses multipart submissions into a media change-set and delegates to the service layer."""

from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile
from sqlalchemy.orm import Session

from app.database import get_db
from app.middleware.auth_middleware import get_current_admin
from app.schemas.auth import AdminOut
from app.schemas.project import ProjectOut, ProjectSummaryOut
from app.services import project_service
from app.services.media_service import ChangeSet
from app.services.relation_service import parse_id_list
from app.services.storage_service import LocalFileStorage, get_storage
from app.utils.forms import parse_string_list

router = APIRouter(prefix="/api/projects", tags=["projects"])


def _fields(
    title, slug, tagline, description, category, features, libraries,
    background, solution, challenge, business_impact, github_url, live_url,
) -> dict:
    return {
        "title": title,
        "slug": slug,
        "tagline": tagline,
        "description": description,
        "category": category,
        "features": parse_string_list(features, "features"),
        "libraries": parse_string_list(libraries, "libraries"),
        "background": background,
        "solution": solution,
        "challenge": challenge,
        "business_impact": business_impact,
        "github_url": github_url,
        "live_url": live_url,
    }


@router.get("", response_model=List[ProjectSummaryOut])
def list_projects(db: Session = Depends(get_db)):
    return project_service.list_projects(db)


@router.get("/slug/{slug}", response_model=ProjectOut)
def get_project_by_slug(slug: str, db: Session = Depends(get_db)):
    return project_service.get_project_by_slug(db, slug)


@router.get("/{project_id}", response_model=ProjectOut)
def get_project(project_id: str, db: Session = Depends(get_db)):
    return project_service.get_project(db, project_id)


@router.post("", response_model=ProjectOut, status_code=201)
async def create_project(
    title: Optional[str] = Form(None),
    slug: Optional[str] = Form(None),
    tagline: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    category: Optional[str] = Form(None),
    features: Optional[str] = Form(None),
    libraries: Optional[str] = Form(None),
    background: Optional[str] = Form(None),
    solution: Optional[str] = Form(None),
    challenge: Optional[str] = Form(None),
    business_impact: Optional[str] = Form(None),
    github_url: Optional[str] = Form(None),
    live_url: Optional[str] = Form(None),
    skill_ids: Optional[str] = Form(None),
    thumbnail: Optional[UploadFile] = File(None),
    gallery: List[UploadFile] = File(default=[]),
    db: Session = Depends(get_db),
    storage: LocalFileStorage = Depends(get_storage),
    _admin: AdminOut = Depends(get_current_admin),
):
    fields = _fields(
        title, slug, tagline, description, category, features, libraries,
        background, solution, challenge, business_impact, github_url, live_url,
    )
    change = ChangeSet(new_thumbnail_file=thumbnail, new_gallery_files=gallery)
    return await project_service.create_project(
        db, fields, change, parse_id_list(skill_ids, "skill_ids"), storage
    )


@router.put("/{project_id}", response_model=ProjectOut)
async def update_project(
    project_id: str,
    title: Optional[str] = Form(None),
    slug: Optional[str] = Form(None),
    tagline: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    category: Optional[str] = Form(None),
    features: Optional[str] = Form(None),
    libraries: Optional[str] = Form(None),
    background: Optional[str] = Form(None),
    solution: Optional[str] = Form(None),
    challenge: Optional[str] = Form(None),
    business_impact: Optional[str] = Form(None),
    github_url: Optional[str] = Form(None),
    live_url: Optional[str] = Form(None),
    skill_ids: Optional[str] = Form(None),
    thumbnail: Optional[UploadFile] = File(None),
    thumbnail_deleted: bool = Form(False),
    gallery: List[UploadFile] = File(default=[]),
    kept_gallery: Optional[str] = Form(None),
    deleted_gallery: Optional[str] = Form(None),
    db: Session = Depends(get_db),
    storage: LocalFileStorage = Depends(get_storage),
    _admin: AdminOut = Depends(get_current_admin),
):
    fields = _fields(
        title, slug, tagline, description, category, features, libraries,
        background, solution, challenge, business_impact, github_url, live_url,
    )
    change = ChangeSet(
        new_thumbnail_file=thumbnail,
        thumbnail_deleted=thumbnail_deleted,
        new_gallery_files=gallery,
        kept_existing_gallery_paths=parse_string_list(kept_gallery, "kept_gallery"),
        deleted_existing_gallery_paths=parse_string_list(deleted_gallery, "deleted_gallery"),
    )
    return await project_service.update_project(
        db, project_id, fields, change, parse_id_list(skill_ids, "skill_ids"), storage
    )


@router.delete("/{project_id}")
def delete_project(
    project_id: str,
    db: Session = Depends(get_db),
    storage: LocalFileStorage = Depends(get_storage),
    _admin: AdminOut = Depends(get_current_admin),
):
    project_service.delete_project(db, project_id, storage)
    return {"message": "Project deleted."}
