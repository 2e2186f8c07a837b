"""Product persistence, including the image map helpers."""
from __future__ import annotations

import uuid
from typing import Any, Dict, List, Protocol, Sequence, Tuple

from storefront.db import models

from .base import SqlAlchemyRepository, database_operation


class ProductRepository(Protocol):
    def find_all(self, page: int, limit: int) -> Tuple[List[models.Product], int]: ...

    def find_by_id(self, id: uuid.UUID) -> models.Product: ...

    def find_by_ids(self, ids: Sequence[uuid.UUID]) -> List[models.Product]: ...

    def create(self, values: Dict[str, Any]) -> models.Product: ...

    def update(self, id: uuid.UUID, values: Dict[str, Any]) -> models.Product: ...

    def delete(self, id: uuid.UUID) -> None: ...

    def add_images(self, id: uuid.UUID, images: Dict[str, str]) -> models.Product: ...

    def delete_image(self, id: uuid.UUID, resolution: str) -> models.Product: ...


class SqlAlchemyProductRepository(SqlAlchemyRepository):
    model = models.Product
    resource = "Product"
    plural = "products"

    def find_by_ids(self, ids: Sequence[uuid.UUID]) -> List[models.Product]:
        if not ids:
            return []
        with database_operation(self.db, "Failed to fetch products"):
            return self._query().filter(models.Product.id.in_(list(ids))).all()

    def add_images(self, id: uuid.UUID, images: Dict[str, str]) -> models.Product:
        product = self.find_by_id(id)
        # JSON columns are only flagged dirty on reassignment
        merged = dict(product.images or {})
        merged.update(images)
        return self.update(id, {"images": merged})

    def delete_image(self, id: uuid.UUID, resolution: str) -> models.Product:
        product = self.find_by_id(id)
        remaining = dict(product.images or {})
        remaining.pop(resolution, None)
        return self.update(id, {"images": remaining})
