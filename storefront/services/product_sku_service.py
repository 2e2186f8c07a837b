"""Product SKU service."""
import logging
import uuid
from typing import Any, Dict, List, Optional

from storefront.db import schemas
from storefront.db.repositories.product_skus import ProductSkuRepository
from storefront.errors import ValidationError
from storefront.utils.pagination import to_paginated

logger = logging.getLogger(__name__)


def _validate_images(images: Optional[List[str]]) -> None:
    for url in images or []:
        if not url.strip():
            raise ValidationError("Image URL cannot be empty")


class ProductSkuService:
    def __init__(self, repository: ProductSkuRepository):
        self.repository = repository

    def get_all_product_skus(self, page: int, limit: int) -> Dict[str, Any]:
        logger.debug("Fetching all product SKUs page=%s limit=%s", page, limit)
        items, total = self.repository.find_all(page, limit)
        return to_paginated(items, total, page, limit)

    def get_product_skus_by_product_id(self, product_id: uuid.UUID):
        logger.debug("Fetching product SKUs for product %s", product_id)
        return self.repository.find_by_product_id(product_id)

    def get_product_sku_by_id(self, id: uuid.UUID):
        return self.repository.find_by_id(id)

    def create_product_sku(self, data: schemas.ProductSkuCreate):
        logger.debug("Creating product SKU %s for product %s", data.name, data.product_id)
        if not data.name.strip():
            logger.warning("Product SKU creation failed: empty name")
            raise ValidationError("Name cannot be empty")
        if not self.repository.product_exists(data.product_id):
            logger.warning("Product SKU creation failed: product %s not found", data.product_id)
            raise ValidationError(f"Product with id {data.product_id} not found")
        _validate_images(data.images)

        values = data.model_dump(exclude_none=True)
        sku = self.repository.create(values)
        logger.info("Product SKU created successfully id=%s", sku.id)
        return sku

    def update_product_sku(self, id: uuid.UUID, data: schemas.ProductSkuUpdate):
        values = data.model_dump(exclude_unset=True, exclude_none=True)
        logger.debug("Updating product SKU %s fields=%s", id, sorted(values))
        if "name" in values and not values["name"].strip():
            logger.warning("Product SKU update failed for %s: empty name", id)
            raise ValidationError("Name cannot be empty")
        _validate_images(values.get("images"))

        sku = self.repository.update(id, values)
        logger.info("Product SKU updated successfully id=%s", id)
        return sku

    def delete_product_sku(self, id: uuid.UUID) -> None:
        logger.debug("Deleting product SKU %s", id)
        self.repository.delete(id)
        logger.info("Product SKU deleted successfully id=%s", id)
