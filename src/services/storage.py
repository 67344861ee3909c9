"""Storage gateway over a SQLAlchemy session.

Services receive a ``Storage`` at construction instead of reaching for a
module-level session, and only ever see application errors from it:
constraint violations surface as ``Conflict``, every other database failure
as ``InternalError``. Nothing is retried.
"""

import logging
from typing import Any, NoReturn, TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from src.errors import Conflict, InternalError, NotFound

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")


class Storage:
    """Single-entity reads and writes against the relational store."""

    def __init__(self, db: Session):
        self.db = db

    def create(self, entity: ModelT) -> ModelT:
        """Insert a new row and return it refreshed with server defaults."""
        self.db.add(entity)
        self._commit(f"create {type(entity).__name__}")
        self.db.refresh(entity)
        return entity

    def find_by_id(self, model: type[ModelT], entity_id: Any, message: str = "Not found") -> ModelT:
        """Get a row by primary key or raise NotFound."""
        try:
            entity = self.db.get(model, entity_id)
        except SQLAlchemyError as e:
            self._fail(f"find {model.__name__} {entity_id}", e)
        if entity is None:
            raise NotFound(message)
        return entity

    def find_one(self, model: type[ModelT], *criteria: Any, message: str = "Not found") -> ModelT:
        """Get the first row matching the criteria or raise NotFound."""
        try:
            entity = self.db.query(model).filter(*criteria).first()
        except SQLAlchemyError as e:
            self._fail(f"find {model.__name__}", e)
        if entity is None:
            raise NotFound(message)
        return entity

    def find_many(
        self, model: type[ModelT], *criteria: Any, order_by: Any = None
    ) -> list[ModelT]:
        """Get all rows matching the criteria."""
        query = self.db.query(model).filter(*criteria)
        if order_by is not None:
            query = query.order_by(order_by)
        try:
            return query.all()
        except SQLAlchemyError as e:
            self._fail(f"list {model.__name__}", e)

    def save(self, entity: ModelT) -> ModelT:
        """Write back all changes made to a loaded row."""
        self.db.add(entity)
        self._commit(f"save {type(entity).__name__}")
        self.db.refresh(entity)
        return entity

    def delete(self, entity: Any) -> None:
        """Delete a loaded row."""
        self.db.delete(entity)
        self._commit(f"delete {type(entity).__name__}")

    def count(self, model: type, *criteria: Any) -> int:
        """Count rows matching the criteria."""
        try:
            return self.db.query(model).filter(*criteria).count()
        except SQLAlchemyError as e:
            self._fail(f"count {model.__name__}", e)

    def _commit(self, action: str) -> None:
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning(f"Constraint violation on {action}: {e.orig}")
            raise Conflict("Resource already exists") from e
        except SQLAlchemyError as e:
            self._fail(action, e)

    def _fail(self, action: str, error: SQLAlchemyError) -> NoReturn:
        self.db.rollback()
        logger.error(f"Storage failure on {action}: {error}")
        raise InternalError("Storage operation failed") from error
