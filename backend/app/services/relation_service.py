"""Full-set replacement of many-to-many links between portfolio entities."""

import logging
from typing import Dict, Iterable, List, Type

from sqlalchemy.orm import Session

from app.database import Base
from app.errors import PersistenceError, ValidationError
from app.models.about import About
from app.models.project import Project
from app.models.skill import Skill, Sosmed
from app.models.work_experience import WorkExperience
from app.utils.forms import parse_string_list

logger = logging.getLogger(__name__)

RELATIONS: Dict[type, Dict[str, Type[Base]]] = {
    Project: {"skills": Skill},
    WorkExperience: {"skills": Skill},
    About: {
        "skills": Skill,
        "sosmed": Sosmed,
        "projects": Project,
        "work_experiences": WorkExperience,
    },
}


def parse_id_list(raw: str | None, field: str) -> List[str] | None:
    """Decode a JSON-encoded identifier array from a form field. Missing field yields None."""
    try:
        values = parse_string_list(raw, field)
    except ValidationError:
        raise ValidationError(f"malformed identifier list: {field}")
    if values is None:
        return None
    if not all(item.strip() for item in values):
        raise ValidationError(f"malformed identifier list: {field}")
    return [item.strip() for item in values]


def unique_ids(ids: Iterable[str]) -> List[str]:
    return list(dict.fromkeys(ids))


def _resolve(db: Session, entity, relation_name: str, ids: Iterable[str]) -> list:
    targets = RELATIONS.get(type(entity), {})
    if relation_name not in targets:
        raise ValueError(f"{type(entity).__name__} has no relation '{relation_name}'")
    model = targets[relation_name]

    wanted = unique_ids(ids)
    rows = db.query(model).filter(model.id.in_(wanted)).all() if wanted else []
    found = {row.id for row in rows}
    missing = [item for item in wanted if item not in found]
    if missing:
        raise PersistenceError(f"unknown {relation_name} id(s): {', '.join(missing)}")
    return rows


def replace_relation(db: Session, entity, relation_name: str, ids: Iterable[str]) -> None:
    """Overwrite ``entity.<relation_name>`` with exactly the rows named by ``ids``.

    Runs inside the caller's transaction. Unknown identifiers raise
    PersistenceError before the relation is touched; an empty list clears it.
    """
    replace_relations(db, entity, {relation_name: list(ids)})


def replace_relations(db: Session, entity, relation_ids: Dict[str, List[str] | None]) -> None:
    """Apply several replacements together; a None value leaves that relation as it is.

    Every identifier list is resolved before any relation is assigned, so an
    unknown id in one relation leaves all of them untouched.
    """
    resolved = {
        relation_name: _resolve(db, entity, relation_name, ids)
        for relation_name, ids in relation_ids.items()
        if ids is not None
    }
    for relation_name, rows in resolved.items():
        setattr(entity, relation_name, rows)
        logger.debug("[relation] %s.%s set to %d link(s)", type(entity).__name__, relation_name, len(rows))
