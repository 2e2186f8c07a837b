"""Database connectivity probe."""
from __future__ import annotations

import time
from typing import Protocol

from sqlalchemy import text
from sqlalchemy.orm import Session

from .base import database_operation


class HealthRepository(Protocol):
    def check_database_connection(self) -> int: ...


class SqlAlchemyHealthRepository:
    def __init__(self, db: Session):
        self.db = db

    def check_database_connection(self) -> int:
        """Run ``SELECT 1`` and return the round trip in milliseconds."""
        started = time.perf_counter()
        with database_operation(self.db, "Database connection failed"):
            self.db.execute(text("SELECT 1"))
        return int((time.perf_counter() - started) * 1000)
