"""Helpers shared by the SQLAlchemy repositories."""
import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Query, Session

from app.errors import PersistenceError

logger = logging.getLogger(__name__)


@contextmanager
def store_errors(db: Session, action: str) -> Iterator[None]:
    """Roll back and re-raise driver failures as PersistenceError."""
    try:
        yield
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Database error while {action}: {e}")
        raise PersistenceError(f"Database error while {action}") from e


def paginate(query: Query, page: int, page_size: int) -> Query:
    """Apply offset pagination to an already ordered query."""
    offset = (page - 1) * page_size
    return query.limit(page_size).offset(offset)


def contains_pattern(text: str) -> str:
    """ILIKE pattern matching text anywhere in a column."""
    return f"%{text}%"
