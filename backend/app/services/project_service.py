"""Project domain service. Field validation, media reconciliation and skill links for portfolio projects."""

import logging
import re
from typing import Any, Dict, List, Optional
from urllib.parse import urlparse

from sqlalchemy.orm import Session

from app.errors import NotFoundError, PersistenceError, PortfolioError, ValidationError
from app.models.project import Project
from app.services import media_service
from app.services.media_service import ChangeSet, MediaFolders, MediaRequirements, MediaSet
from app.services.relation_service import replace_relations
from app.utils.db import commit_or_raise
from app.utils.helpers import clean_text_list

logger = logging.getLogger(__name__)

PROJECT_MEDIA = MediaRequirements(thumbnail_required=True, gallery_required=True)
PROJECT_FOLDERS = MediaFolders(thumbnail="thumbnails", gallery="gallery")

SLUG_RE = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
REQUIRED_TEXT_FIELDS = (
    "title", "slug", "tagline", "description", "category",
    "background", "solution", "challenge",
)
REQUIRED_LIST_FIELDS = {"features": "feature", "libraries": "library"}
URL_FIELDS = ("github_url", "live_url")


def _is_http_url(value: str) -> bool:
    parsed = urlparse(value)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def normalize_fields(fields: Dict[str, Any], partial: bool = False) -> Dict[str, Any]:
    """Validate submitted project fields. With partial=True, None means "unchanged" and is dropped."""
    payload: Dict[str, Any] = {}

    for key in REQUIRED_TEXT_FIELDS:
        value = fields.get(key)
        if value is None and partial:
            continue
        text = (value or "").strip()
        if not text:
            raise ValidationError(f"{key} is required")
        payload[key] = text

    if "slug" in payload:
        if not SLUG_RE.match(payload["slug"]):
            raise ValidationError("slug must be lowercase, alphanumeric, and hyphen-separated")

    for key, label in REQUIRED_LIST_FIELDS.items():
        value = fields.get(key)
        if value is None and partial:
            continue
        items = clean_text_list(value)
        if not items:
            raise ValidationError(f"at least one {label} is required")
        payload[key] = items

    for key in URL_FIELDS:
        value = fields.get(key)
        if value is None and partial:
            continue
        text = (value or "").strip()
        if text and not _is_http_url(text):
            raise ValidationError(f"invalid {key}")
        payload[key] = text

    if fields.get("business_impact") is not None or not partial:
        payload["business_impact"] = (fields.get("business_impact") or "").strip() or None

    return payload


def _ensure_slug_available(db: Session, slug: str, project_id: Optional[str] = None) -> None:
    q = db.query(Project.id).filter(Project.slug == slug)
    if project_id:
        q = q.filter(Project.id != project_id)
    if q.first():
        raise PersistenceError(f"slug '{slug}' is already in use")


def media_of(project: Project) -> MediaSet:
    return MediaSet(thumbnail=project.thumbnail or None, gallery=list(project.gallery or []))


def list_projects(db: Session) -> List[Project]:
    return db.query(Project).order_by(Project.created_at.desc()).all()


def get_project(db: Session, project_id: str) -> Project:
    project = db.query(Project).filter(Project.id == project_id).first()
    if not project:
        raise NotFoundError("Project not found.")
    return project


def get_project_by_slug(db: Session, slug: str) -> Project:
    project = db.query(Project).filter(Project.slug == slug).first()
    if not project:
        raise NotFoundError("Project not found.")
    return project


async def create_project(
    db: Session,
    fields: Dict[str, Any],
    change: ChangeSet,
    skill_ids: Optional[List[str]],
    storage,
) -> Project:
    payload = normalize_fields(fields)
    _ensure_slug_available(db, payload["slug"])

    result = await media_service.reconcile_media(MediaSet(), change, storage, PROJECT_MEDIA, PROJECT_FOLDERS)
    project = Project(**payload, thumbnail=result.media.thumbnail, gallery=result.media.gallery)
    try:
        db.add(project)
        replace_relations(db, project, {"skills": skill_ids or []})
        commit_or_raise(db, "create project")
    except PortfolioError:
        db.rollback()
        media_service.discard_stored(result, storage)
        raise
    db.refresh(project)
    logger.info("[project] created %s with %d gallery image(s)", project.id, len(project.gallery))
    return project


async def update_project(
    db: Session,
    project_id: str,
    fields: Dict[str, Any],
    change: ChangeSet,
    skill_ids: Optional[List[str]],
    storage,
) -> Project:
    project = get_project(db, project_id)
    payload = normalize_fields(fields, partial=True)
    if "slug" in payload:
        _ensure_slug_available(db, payload["slug"], project_id=project.id)

    previous = media_of(project)
    unknown = [path for path in change.kept_existing_gallery_paths or [] if path not in previous.gallery]
    if unknown:
        raise ValidationError(f"unknown gallery path: {', '.join(unknown)}")

    result = await media_service.reconcile_media(previous, change, storage, PROJECT_MEDIA, PROJECT_FOLDERS)
    try:
        for k, v in payload.items():
            setattr(project, k, v)
        project.thumbnail = result.media.thumbnail
        project.gallery = result.media.gallery
        replace_relations(db, project, {"skills": skill_ids})
        commit_or_raise(db, "update project")
    except PortfolioError:
        db.rollback()
        media_service.discard_stored(result, storage)
        raise

    media_service.commit_deletions(result, storage)
    db.refresh(project)
    return project


def delete_project(db: Session, project_id: str, storage) -> None:
    project = get_project(db, project_id)
    media = media_of(project)
    db.delete(project)
    commit_or_raise(db, "delete project")
    media_service.purge_media(media, storage)
    logger.info("[project] deleted %s", project_id)
