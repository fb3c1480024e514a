import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.errors import PersistenceError

logger = logging.getLogger(__name__)


def commit_or_raise(db: Session, action: str) -> None:
    """Commit the session, translating database failures into PersistenceError after a rollback."""
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        logger.warning("[db] %s violated a constraint: %s", action, exc.orig)
        raise PersistenceError(f"{action} failed: conflicting or missing related data") from exc
    except SQLAlchemyError as exc:
        db.rollback()
        logger.warning("[db] %s failed: %s", action, exc)
        raise PersistenceError(f"{action} failed: database error") from exc
