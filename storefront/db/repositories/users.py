"""User persistence."""
from __future__ import annotations

import uuid
from typing import Any, Dict, List, Optional, Protocol, Tuple

from storefront.db import models

from .base import SqlAlchemyRepository, database_operation


class UserRepository(Protocol):
    """Storage operations the user and auth services rely on."""

    def find_all(self, page: int, limit: int) -> Tuple[List[models.User], int]: ...

    def find_by_id(self, id: uuid.UUID) -> models.User: ...

    def find_by_email(self, email: str) -> Optional[models.User]: ...

    def exists(self, id: uuid.UUID) -> bool: ...

    def create(self, values: Dict[str, Any]) -> models.User: ...

    def update(self, id: uuid.UUID, values: Dict[str, Any]) -> models.User: ...

    def delete(self, id: uuid.UUID) -> None: ...


class SqlAlchemyUserRepository(SqlAlchemyRepository):
    model = models.User
    resource = "User"
    plural = "users"

    def find_by_email(self, email: str) -> Optional[models.User]:
        with database_operation(self.db, "Failed to fetch user by email"):
            return self._query().filter(models.User.email == email).first()

    def exists(self, id: uuid.UUID) -> bool:
        with database_operation(self.db, "Failed to check user existence"):
            return self.db.query(models.User.id).filter(models.User.id == id).first() is not None
