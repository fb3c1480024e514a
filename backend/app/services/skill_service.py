"""Skill and Sosmed domain services."""

from typing import List

from sqlalchemy.orm import Session

from app.errors import NotFoundError
from app.models.skill import Skill, Sosmed
from app.schemas.skill import SkillCreate, SkillUpdate, SosmedCreate, SosmedUpdate
from app.utils.db import commit_or_raise


def list_skills(db: Session) -> List[Skill]:
    return db.query(Skill).order_by(Skill.created_at.desc(), Skill.name).all()


def get_skill(db: Session, skill_id: str) -> Skill:
    skill = db.query(Skill).filter(Skill.id == skill_id).first()
    if not skill:
        raise NotFoundError("Skill not found.")
    return skill


def create_skill(db: Session, data: SkillCreate) -> Skill:
    skill = Skill(name=data.name.strip(), icon=data.icon.strip())
    db.add(skill)
    commit_or_raise(db, "create skill")
    db.refresh(skill)
    return skill


def update_skill(db: Session, skill_id: str, data: SkillUpdate) -> Skill:
    skill = get_skill(db, skill_id)
    for k, v in data.model_dump(exclude_none=True).items():
        setattr(skill, k, v.strip())
    commit_or_raise(db, "update skill")
    db.refresh(skill)
    return skill


def delete_skill(db: Session, skill_id: str) -> None:
    skill = get_skill(db, skill_id)
    db.delete(skill)
    commit_or_raise(db, "delete skill")


def list_sosmed(db: Session) -> List[Sosmed]:
    return db.query(Sosmed).order_by(Sosmed.created_at.desc(), Sosmed.name).all()


def get_sosmed(db: Session, sosmed_id: str) -> Sosmed:
    sosmed = db.query(Sosmed).filter(Sosmed.id == sosmed_id).first()
    if not sosmed:
        raise NotFoundError("Social media link not found.")
    return sosmed


def create_sosmed(db: Session, data: SosmedCreate) -> Sosmed:
    sosmed = Sosmed(name=data.name.strip(), url=data.url.strip())
    db.add(sosmed)
    commit_or_raise(db, "create sosmed")
    db.refresh(sosmed)
    return sosmed


def update_sosmed(db: Session, sosmed_id: str, data: SosmedUpdate) -> Sosmed:
    sosmed = get_sosmed(db, sosmed_id)
    for k, v in data.model_dump(exclude_none=True).items():
        setattr(sosmed, k, v.strip())
    commit_or_raise(db, "update sosmed")
    db.refresh(sosmed)
    return sosmed


def delete_sosmed(db: Session, sosmed_id: str) -> None:
    sosmed = get_sosmed(db, sosmed_id)
    db.delete(sosmed)
    commit_or_raise(db, "delete sosmed")
