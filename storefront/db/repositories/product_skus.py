"""Product SKU persistence."""
from __future__ import annotations

import uuid
from typing import Any, Dict, List, Protocol, Tuple

from storefront.db import models

from .base import SqlAlchemyRepository, database_operation


class ProductSkuRepository(Protocol):
    def find_all(self, page: int, limit: int) -> Tuple[List[models.ProductSku], int]: ...

    def find_by_product_id(self, product_id: uuid.UUID) -> List[models.ProductSku]: ...

    def find_by_id(self, id: uuid.UUID) -> models.ProductSku: ...

    def product_exists(self, product_id: uuid.UUID) -> bool: ...

    def create(self, values: Dict[str, Any]) -> models.ProductSku: ...

    def update(self, id: uuid.UUID, values: Dict[str, Any]) -> models.ProductSku: ...

    def delete(self, id: uuid.UUID) -> None: ...


class SqlAlchemyProductSkuRepository(SqlAlchemyRepository):
    model = models.ProductSku
    resource = "Product SKU"
    plural = "product SKUs"

    def find_by_product_id(self, product_id: uuid.UUID) -> List[models.ProductSku]:
        with database_operation(self.db, "Failed to fetch product SKUs for product"):
            return (
                self._query()
                .filter(models.ProductSku.product_id == product_id)
                .order_by(models.ProductSku.created_at)
                .all()
            )

    def product_exists(self, product_id: uuid.UUID) -> bool:
        with database_operation(self.db, "Failed to check product existence"):
            return self.db.query(models.Product.id).filter(models.Product.id == product_id).first() is not None
