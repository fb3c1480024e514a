"""Service layer package."""

from app.services import (
    auth_service,
    storage_service,
    media_service,
    relation_service,
    skill_service,
    work_experience_service,
    project_service,
    about_service,
    media_cleanup_service,
)
