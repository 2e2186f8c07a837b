"""
Product service: catalog rules and the image map operations.
"""
import logging
import uuid
from decimal import Decimal
from typing import Any, Dict

from storefront.db import schemas
from storefront.db.repositories.products import ProductRepository
from storefront.errors import ValidationError
from storefront.utils.pagination import to_paginated

logger = logging.getLogger(__name__)


class ProductService:
    """Service class for the product catalog."""

    def __init__(self, repository: ProductRepository):
        self.repository = repository

    def get_all_products(self, page: int, limit: int) -> Dict[str, Any]:
        logger.debug("Fetching all products page=%s limit=%s", page, limit)
        items, total = self.repository.find_all(page, limit)
        logger.info("Products fetched successfully count=%s total=%s", len(items), total)
        return to_paginated(items, total, page, limit)

    def get_product_by_id(self, id: uuid.UUID):
        logger.debug("Fetching product by id %s", id)
        return self.repository.find_by_id(id)

    def create_product(self, data: schemas.ProductCreate):
        logger.debug("Creating product %s", data.name)
        values = data.model_dump(exclude_none=True)
        try:
            self._validate(values)
            if "old_price" in values and values["old_price"] <= 0:
                raise ValidationError("Old price must be greater than zero")
        except ValidationError as exc:
            logger.warning("Product creation failed: %s", exc.message)
            raise

        product = self.repository.create(values)
        logger.info("Product created successfully id=%s name=%s", product.id, product.name)
        return product

    def update_product(self, id: uuid.UUID, data: schemas.ProductUpdate):
        values = data.model_dump(exclude_unset=True, exclude_none=True)
        logger.debug("Updating product %s fields=%s", id, sorted(values))
        try:
            self._validate(values)
        except ValidationError as exc:
            logger.warning("Product update failed for %s: %s", id, exc.message)
            raise

        if "price" in values:
            current = self.repository.find_by_id(id)
            previous = Decimal(str(current.price))
            if previous != values["price"]:
                values["old_price"] = previous

        product = self.repository.update(id, values)
        logger.info("Product updated successfully id=%s", id)
        return product

    def delete_product(self, id: uuid.UUID) -> None:
        logger.debug("Deleting product %s", id)
        self.repository.delete(id)
        logger.info("Product deleted successfully id=%s", id)

    def add_images(self, id: uuid.UUID, images: Dict[str, str]):
        logger.debug("Adding images to product %s resolutions=%s", id, sorted(images))
        product = self.repository.add_images(id, images)
        logger.info("Images added successfully id=%s", id)
        return product

    def delete_image(self, id: uuid.UUID, resolution: str):
        logger.debug("Deleting image from product %s resolution=%s", id, resolution)
        product = self.repository.delete_image(id, resolution)
        logger.info("Image deleted successfully id=%s", id)
        return product

    @staticmethod
    def _validate(values: Dict[str, Any]) -> None:
        if "name" in values and not values["name"].strip():
            raise ValidationError("Name cannot be empty")
        if "price" in values and values["price"] <= 0:
            raise ValidationError("Price must be greater than zero")
        if "quantity" in values and values["quantity"] <= 0:
            raise ValidationError("Quantity must be greater than zero")
