import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import asc, desc
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from inventory_api.core.errors import AppError, ConflictError, InternalError, ValidationError
from inventory_api.schemas.common import SortOrder

logger = logging.getLogger(__name__)

UNIQUE_VIOLATION = "unique"
FOREIGN_KEY_VIOLATION = "foreign_key"
MISSING_REFERENCE_MESSAGE = "Referenced entity does not exist"


def constraint_kind(exc: IntegrityError) -> str | None:
    code = getattr(exc.orig, "pgcode", None)
    if code == "23505":
        return UNIQUE_VIOLATION
    if code == "23503":
        return FOREIGN_KEY_VIOLATION

    text = str(exc.orig).lower()
    if "unique constraint" in text or "duplicate key" in text:
        return UNIQUE_VIOLATION
    if "foreign key constraint" in text:
        return FOREIGN_KEY_VIOLATION
    return None


def norm_like(value: str) -> str:
    return f"%{value.strip().lower()}%"


def order_clause(column, sort_order: SortOrder):
    return desc(column) if sort_order == "desc" else asc(column)


class SqlRepository:
    conflict_message = "Record already exists"

    def __init__(self, db: Session) -> None:
        self.db = db

    @contextmanager
    def guard(self, action: str) -> Iterator[None]:
        """Roll back and translate database failures raised inside the block."""
        try:
            yield
        except IntegrityError as exc:
            self.db.rollback()
            raise self._integrity_error(exc, action) from exc
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error("Database failure while %s: %s", action, exc)
            raise InternalError(f"Error {action}: {exc}") from exc

    def _integrity_error(self, exc: IntegrityError, action: str) -> AppError:
        kind = constraint_kind(exc)
        if kind == UNIQUE_VIOLATION:
            return ConflictError(self.conflict_message)
        if kind == FOREIGN_KEY_VIOLATION:
            return ValidationError(MISSING_REFERENCE_MESSAGE)
        logger.error("Unexpected integrity error while %s: %s", action, exc)
        return InternalError(f"Error {action}: {exc.orig}")
