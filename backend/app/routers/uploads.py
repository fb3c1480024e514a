"""Upload maintenance API router."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.middleware.auth_middleware import get_current_admin
from app.schemas.auth import AdminOut
from app.schemas.upload import MediaCleanupOut
from app.services import media_cleanup_service
from app.services.storage_service import LocalFileStorage, get_storage

router = APIRouter(prefix="/api/uploads", tags=["uploads"])


@router.post("/cleanup", response_model=MediaCleanupOut)
def cleanup_orphan_media(
    dry_run: bool = True,
    db: Session = Depends(get_db),
    storage: LocalFileStorage = Depends(get_storage),
    _admin: AdminOut = Depends(get_current_admin),
):
    return media_cleanup_service.cleanup_orphan_media(db, storage, dry_run=dry_run)
