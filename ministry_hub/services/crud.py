"""Generic CRUD service shared by every entity."""

import logging
from datetime import UTC, datetime
from typing import Any, Generic, TypeVar

from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ministry_hub.models.base import Base

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)

# Primary keys are 32-bit integer identities; anything outside cannot exist.
MAX_ENTITY_ID = 2_147_483_647


class ConstraintViolationError(Exception):
    """Raised when the database rejects a write (unique name, unknown foreign key, ...)."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


def utcnow() -> datetime:
    return datetime.now(UTC)


class CrudService(Generic[ModelT]):
    """
    create/read/update/delete against one table.

    Input arrives already validated as a pydantic model; the service assigns
    timestamps and never raises for missing ids (None / False instead).
    """

    def __init__(
        self,
        model: type[ModelT],
        *,
        label: str,
        order_by: str = "created_at",
        delete_conflict_message: str | None = None,
    ) -> None:
        self.model = model
        self.label = label
        self.delete_conflict_message = delete_conflict_message
        self._order_column = getattr(model, order_by)

    @property
    def not_found_message(self) -> str:
        return f"{self.label} not found"

    @property
    def conflict_message(self) -> str:
        return f"{self.label} conflicts with existing records"

    def list(self, db: Session) -> list[ModelT]:
        """Return every row, ordered by the configured column then id."""
        return db.query(self.model).order_by(self._order_column, self.model.id).all()

    def get_by_id(self, db: Session, entity_id: int) -> ModelT | None:
        if not 1 <= entity_id <= MAX_ENTITY_ID:
            return None
        return db.get(self.model, entity_id)

    def create(self, db: Session, data: BaseModel) -> ModelT:
        now = utcnow()
        row = self.model(created_at=now, updated_at=now)
        self._apply(row, data.model_dump())
        db.add(row)
        self._commit(db, "create")
        db.refresh(row)
        return row

    def update(self, db: Session, entity_id: int, data: BaseModel) -> ModelT | None:
        """Apply only the fields present in the request; re-stamps updated_at."""
        return self._write(db, entity_id, data.model_dump(exclude_unset=True), "update")

    def replace(self, db: Session, entity_id: int, data: BaseModel) -> ModelT | None:
        """Overwrite every field; optional fields missing from `data` take their defaults."""
        return self._write(db, entity_id, data.model_dump(), "replace")

    def _write(self, db: Session, entity_id: int, values: dict[str, Any], operation: str) -> ModelT | None:
        row = self.get_by_id(db, entity_id)
        if row is None:
            return None
        self._apply(row, values)
        row.updated_at = utcnow()
        self._commit(db, operation)
        db.refresh(row)
        return row

    def _apply(self, row: ModelT, values: dict[str, Any]) -> None:
        """Copy validated values onto the row. Subclasses handle nested collections here."""
        for field, value in values.items():
            setattr(row, field, value)

    def delete(self, db: Session, entity_id: int) -> bool:
        row = self.get_by_id(db, entity_id)
        if row is None:
            return False
        db.delete(row)
        self._commit(db, "delete", self.delete_conflict_message)
        return True

    def count(self, db: Session) -> int:
        return db.query(self.model).count()

    def _commit(self, db: Session, operation: str, message: str | None = None) -> None:
        try:
            db.commit()
        except IntegrityError as e:
            db.rollback()
            logger.warning(
                "Write rejected by database constraint",
                extra={"entity": self.model.__tablename__, "operation": operation, "reason": str(e.orig)[:300]},
            )
            raise ConstraintViolationError(message or self.conflict_message) from e
