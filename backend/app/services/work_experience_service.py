"""Work experience domain service."""

import logging
from typing import List

from sqlalchemy.orm import Session

from app.errors import NotFoundError, PortfolioError, ValidationError
from app.models.work_experience import WorkExperience
from app.schemas.work_experience import WorkExperienceCreate, WorkExperienceUpdate
from app.services.relation_service import replace_relations
from app.utils.db import commit_or_raise
from app.utils.helpers import clean_text_list

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("position", "employment_type", "company", "start_date")


def list_work_experiences(db: Session) -> List[WorkExperience]:
    return (
        db.query(WorkExperience)
        .order_by(WorkExperience.start_date.desc(), WorkExperience.created_at.desc())
        .all()
    )


def get_work_experience(db: Session, work_experience_id: str) -> WorkExperience:
    row = db.query(WorkExperience).filter(WorkExperience.id == work_experience_id).first()
    if not row:
        raise NotFoundError("Work experience not found.")
    return row


def create_work_experience(db: Session, data: WorkExperienceCreate) -> WorkExperience:
    payload = data.model_dump(exclude={"skill_ids"})
    payload["description"] = clean_text_list(payload.get("description"))
    row = WorkExperience(**payload)
    db.add(row)
    try:
        replace_relations(db, row, {"skills": data.skill_ids})
        commit_or_raise(db, "create work experience")
    except PortfolioError:
        db.rollback()
        raise
    db.refresh(row)
    return row


def update_work_experience(db: Session, work_experience_id: str, data: WorkExperienceUpdate) -> WorkExperience:
    row = get_work_experience(db, work_experience_id)
    payload = data.model_dump(exclude_unset=True)
    skill_ids = payload.pop("skill_ids", None)

    for key in REQUIRED_FIELDS:
        if key in payload and (payload[key] is None or str(payload[key]).strip() == ""):
            raise ValidationError(f"{key} is required")
    if "description" in payload:
        payload["description"] = clean_text_list(payload["description"])

    start_date = payload.get("start_date", row.start_date)
    end_date = payload.get("end_date", row.end_date)
    if end_date and start_date and end_date < start_date:
        raise ValidationError("end_date must not be before start_date")

    try:
        for k, v in payload.items():
            setattr(row, k, v)
        replace_relations(db, row, {"skills": skill_ids})
        commit_or_raise(db, "update work experience")
    except PortfolioError:
        db.rollback()
        raise
    db.refresh(row)
    return row


def delete_work_experience(db: Session, work_experience_id: str) -> None:
    row = get_work_experience(db, work_experience_id)
    db.delete(row)
    commit_or_raise(db, "delete work experience")
    logger.info("[work_experience] deleted %s", work_experience_id)
