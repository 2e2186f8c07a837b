"""
Order persistence.

Orders are always loaded with their items; ``create_with_items`` writes the
order and every line in a single commit.
"""
from __future__ import annotations

import uuid
from decimal import Decimal
from typing import Any, Dict, List, Protocol, Tuple

from storefront.db import models

from .base import SqlAlchemyRepository, database_operation


class OrderRepository(Protocol):
    def find_all(self, page: int, limit: int) -> Tuple[List[models.Order], int]: ...

    def find_by_id(self, id: uuid.UUID) -> models.Order: ...

    def find_by_user_id(self, user_id: uuid.UUID, page: int, limit: int) -> Tuple[List[models.Order], int]: ...

    def create_with_items(self, user_id: uuid.UUID, total: Decimal, items: List[Dict[str, Any]]) -> models.Order: ...

    def update(self, id: uuid.UUID, values: Dict[str, Any]) -> models.Order: ...

    def delete(self, id: uuid.UUID) -> None: ...


class SqlAlchemyOrderRepository(SqlAlchemyRepository):
    model = models.Order
    resource = "Order"
    plural = "orders"

    def find_by_user_id(self, user_id: uuid.UUID, page: int, limit: int) -> Tuple[List[models.Order], int]:
        query = self._query().filter(models.Order.user_id == user_id)
        return self._paginate(query, page, limit)

    def create_with_items(self, user_id: uuid.UUID, total: Decimal, items: List[Dict[str, Any]]) -> models.Order:
        with database_operation(self.db, "Failed to create order"):
            order = models.Order(user_id=user_id, total=total, status="pending")
            order.items = [models.OrderItem(**item) for item in items]
            self.db.add(order)
            self.db.commit()
            self.db.refresh(order)
        return order
