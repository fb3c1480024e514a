"""About profile domain service. Profile picture reconciliation and the four relation sets."""

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from app.errors import NotFoundError, PortfolioError, ValidationError
from app.models.about import About
from app.services import media_service
from app.services.media_service import ChangeSet, MediaFolders, MediaRequirements, MediaSet
from app.services.relation_service import replace_relations
from app.utils.db import commit_or_raise

logger = logging.getLogger(__name__)

ABOUT_MEDIA = MediaRequirements(thumbnail_required=False, gallery_required=False)
ABOUT_FOLDERS = MediaFolders(thumbnail="profile", gallery="profile")
REQUIRED_TEXT_FIELDS = ("name", "job_title", "introduction")
RELATION_NAMES = ("skills", "sosmed", "projects", "work_experiences")


def _normalize_fields(fields: Dict[str, Any], partial: bool = False) -> Dict[str, str]:
    payload = {}
    for key in REQUIRED_TEXT_FIELDS:
        value = fields.get(key)
        if value is None and partial:
            continue
        text = (value or "").strip()
        if not text:
            raise ValidationError(f"{key} is required")
        payload[key] = text
    return payload


def media_of(about: About) -> MediaSet:
    return MediaSet(thumbnail=about.profile_picture or None)


def list_abouts(db: Session) -> List[About]:
    return db.query(About).order_by(About.created_at.asc()).all()


def get_about(db: Session, about_id: str) -> About:
    about = db.query(About).filter(About.id == about_id).first()
    if not about:
        raise NotFoundError("About profile not found.")
    return about


def get_landing(db: Session) -> About:
    """The profile rendered on the public landing page: the earliest one created."""
    about = db.query(About).order_by(About.created_at.asc()).first()
    if not about:
        raise NotFoundError("No portfolio profile has been published yet.")
    return about


async def create_about(
    db: Session,
    fields: Dict[str, Any],
    profile_file,
    relation_ids: Dict[str, Optional[List[str]]],
    storage,
) -> About:
    payload = _normalize_fields(fields)
    change = ChangeSet(new_thumbnail_file=profile_file)
    result = await media_service.reconcile_media(MediaSet(), change, storage, ABOUT_MEDIA, ABOUT_FOLDERS)

    about = About(**payload, profile_picture=result.media.thumbnail)
    try:
        db.add(about)
        replace_relations(db, about, {name: relation_ids.get(name) or [] for name in RELATION_NAMES})
        commit_or_raise(db, "create about")
    except PortfolioError:
        db.rollback()
        media_service.discard_stored(result, storage)
        raise
    db.refresh(about)
    logger.info("[about] created %s", about.id)
    return about


async def update_about(
    db: Session,
    about_id: str,
    fields: Dict[str, Any],
    profile_file,
    profile_deleted: bool,
    relation_ids: Dict[str, Optional[List[str]]],
    storage,
) -> About:
    about = get_about(db, about_id)
    payload = _normalize_fields(fields, partial=True)
    change = ChangeSet(new_thumbnail_file=profile_file, thumbnail_deleted=profile_deleted)
    result = await media_service.reconcile_media(media_of(about), change, storage, ABOUT_MEDIA, ABOUT_FOLDERS)

    try:
        for k, v in payload.items():
            setattr(about, k, v)
        about.profile_picture = result.media.thumbnail
        replace_relations(db, about, {name: relation_ids.get(name) for name in RELATION_NAMES})
        commit_or_raise(db, "update about")
    except PortfolioError:
        db.rollback()
        media_service.discard_stored(result, storage)
        raise

    media_service.commit_deletions(result, storage)
    db.refresh(about)
    return about


def delete_about(db: Session, about_id: str, storage) -> None:
    about = get_about(db, about_id)
    media = media_of(about)
    db.delete(about)
    commit_or_raise(db, "delete about")
    media_service.purge_media(media, storage)
    logger.info("[about] deleted %s", about_id)
