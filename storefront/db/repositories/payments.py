"""Payment persistence."""
from __future__ import annotations

import uuid
from typing import Any, Dict, List, Protocol, Tuple

from storefront.db import models

from .base import SqlAlchemyRepository, database_operation


class PaymentRepository(Protocol):
    def find_all(self, page: int, limit: int) -> Tuple[List[models.Payment], int]: ...

    def find_by_id(self, id: uuid.UUID) -> models.Payment: ...

    def find_by_order_id(self, order_id: uuid.UUID) -> List[models.Payment]: ...

    def order_exists(self, order_id: uuid.UUID) -> bool: ...

    def create(self, values: Dict[str, Any]) -> models.Payment: ...

    def update(self, id: uuid.UUID, values: Dict[str, Any]) -> models.Payment: ...

    def delete(self, id: uuid.UUID) -> None: ...


class SqlAlchemyPaymentRepository(SqlAlchemyRepository):
    model = models.Payment
    resource = "Payment"
    plural = "payments"

    def find_by_order_id(self, order_id: uuid.UUID) -> List[models.Payment]:
        with database_operation(self.db, "Failed to fetch payments for order"):
            return (
                self._query()
                .filter(models.Payment.order_id == order_id)
                .order_by(models.Payment.created_at)
                .all()
            )

    def order_exists(self, order_id: uuid.UUID) -> bool:
        with database_operation(self.db, "Failed to check order existence"):
            return self.db.query(models.Order.id).filter(models.Order.id == order_id).first() is not None
