"""Orphan media cleanup. Finds uploaded images that no project or profile references any more."""

import os

from sqlalchemy.orm import Session

from app.config import settings
from app.models.about import About
from app.models.project import Project
from app.services.about_service import ABOUT_FOLDERS
from app.services.project_service import PROJECT_FOLDERS

MEDIA_FOLDERS = sorted({
    PROJECT_FOLDERS.thumbnail,
    PROJECT_FOLDERS.gallery,
    ABOUT_FOLDERS.thumbnail,
    ABOUT_FOLDERS.gallery,
})


def collect_referenced_media_urls(db: Session) -> set[str]:
    referenced: set[str] = set()
    for thumbnail, gallery in db.query(Project.thumbnail, Project.gallery).all():
        if thumbnail:
            referenced.add(thumbnail)
        referenced.update(url for url in gallery or [] if url)
    referenced.update(row[0] for row in db.query(About.profile_picture).all() if row[0])
    return referenced


def collect_existing_media_urls() -> set[str]:
    existing: set[str] = set()
    for folder in MEDIA_FOLDERS:
        root = os.path.join(settings.UPLOAD_DIR, folder)
        if not os.path.exists(root):
            continue
        for dirpath, _, filenames in os.walk(root):
            for filename in filenames:
                abs_path = os.path.join(dirpath, filename)
                rel_path = os.path.relpath(abs_path, settings.UPLOAD_DIR).replace("\\", "/")
                existing.add(f"/uploads/{rel_path}")
    return existing


def cleanup_orphan_media(db: Session, storage, dry_run: bool = True):
    referenced = collect_referenced_media_urls(db)
    existing = collect_existing_media_urls()
    orphan_urls = sorted(existing - referenced)

    deleted_count = 0
    if not dry_run:
        for url in orphan_urls:
            if storage.exists(url):
                storage.delete(url)
                deleted_count += 1

    return {
        "dry_run": dry_run,
        "referenced_count": len(referenced),
        "existing_count": len(existing),
        "orphan_count": len(orphan_urls),
        "deleted_count": deleted_count,
        "orphan_urls": orphan_urls,
    }
