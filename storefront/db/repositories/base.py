"""
Shared SQLAlchemy repository plumbing.

Every repository takes a request-scoped ``Session``. Driver failures surface
as ``DatabaseError`` with a short context prefix; lookups by id raise
``NotFoundError``.
"""
from __future__ import annotations

import logging
import uuid
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from storefront.errors import DatabaseError, NotFoundError
from storefront.utils.pagination import page_offset

logger = logging.getLogger(__name__)


@contextmanager
def database_operation(db: Session, context: str) -> Iterator[None]:
    """Roll back and re-raise driver errors as ``DatabaseError``."""
    try:
        yield
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("%s: %s", context, exc)
        raise DatabaseError(f"{context}: {exc}") from exc


class SqlAlchemyRepository:
    """CRUD helpers for a single mapped model."""

    model: Any = None
    resource: str = "Entity"
    plural: str = "entities"

    def __init__(self, db: Session):
        self.db = db

    def _query(self):
        return self.db.query(self.model)

    def _paginate(self, query, page: int, limit: int) -> Tuple[List[Any], int]:
        with database_operation(self.db, f"Failed to fetch {self.plural}"):
            total = query.order_by(None).count()
            items = (
                query.order_by(self.model.created_at, self.model.id)
                .offset(page_offset(page, limit))
                .limit(limit)
                .all()
            )
        return items, total

    def find_all(self, page: int, limit: int) -> Tuple[List[Any], int]:
        return self._paginate(self._query(), page, limit)

    def find_by_id(self, id: uuid.UUID):
        with database_operation(self.db, f"Failed to fetch {self.resource.lower()}"):
            obj = self._query().filter(self.model.id == id).first()
        if obj is None:
            raise NotFoundError(self.resource, id)
        return obj

    def create(self, values: Dict[str, Any]):
        with database_operation(self.db, f"Failed to create {self.resource.lower()}"):
            obj = self.model(**values)
            self.db.add(obj)
            self.db.commit()
            self.db.refresh(obj)
        return obj

    def update(self, id: uuid.UUID, values: Dict[str, Any]):
        obj = self.find_by_id(id)
        with database_operation(self.db, f"Failed to update {self.resource.lower()}"):
            for key, value in values.items():
                setattr(obj, key, value)
            self.db.commit()
            self.db.refresh(obj)
        return obj

    def delete(self, id: uuid.UUID) -> None:
        obj = self.find_by_id(id)
        with database_operation(self.db, f"Failed to delete {self.resource.lower()}"):
            self.db.delete(obj)
            self.db.commit()
