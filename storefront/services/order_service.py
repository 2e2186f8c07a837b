"""
Order service.

Creating an order checks the buyer and every product, snapshots the current
product price onto each line and persists the order with its lines at once:

    subtotal = price_at_order * quantity
    total    = sum(subtotal for every line)

All money arithmetic is done on ``Decimal``.
"""
import logging
import uuid
from decimal import Decimal
from typing import Any, Dict, List

from storefront.db import schemas
from storefront.db.repositories.orders import OrderRepository
from storefront.db.repositories.products import ProductRepository
from storefront.db.repositories.users import UserRepository
from storefront.errors import NotFoundError, ValidationError
from storefront.utils.pagination import to_paginated

logger = logging.getLogger(__name__)


class OrderService:
    """Service class for orders and their line items."""

    def __init__(
        self,
        repository: OrderRepository,
        user_repository: UserRepository,
        product_repository: ProductRepository,
    ):
        self.repository = repository
        self.user_repository = user_repository
        self.product_repository = product_repository

    def get_all_orders(self, page: int, limit: int) -> Dict[str, Any]:
        logger.debug("Fetching all orders page=%s limit=%s", page, limit)
        items, total = self.repository.find_all(page, limit)
        return to_paginated(items, total, page, limit)

    def get_order_by_id(self, id: uuid.UUID):
        return self.repository.find_by_id(id)

    def get_orders_by_user_id(self, user_id: uuid.UUID, page: int, limit: int) -> Dict[str, Any]:
        logger.debug("Fetching orders for user %s page=%s limit=%s", user_id, page, limit)
        items, total = self.repository.find_by_user_id(user_id, page, limit)
        return to_paginated(items, total, page, limit)

    def create_order(self, data: schemas.OrderCreate):
        logger.debug("Creating order for user %s with %s item(s)", data.user_id, len(data.items or []))
        if not data.items:
            logger.warning("Order creation failed: no items")
            raise ValidationError("Order must have at least one item")

        if not self.user_repository.exists(data.user_id):
            logger.warning("Order creation failed: user %s not found", data.user_id)
            raise NotFoundError("User", data.user_id)

        # A product may appear on several lines; look each one up once
        product_ids = list(dict.fromkeys(item.product_id for item in data.items))
        products = {p.id: p for p in self.product_repository.find_by_ids(product_ids)}
        missing = [pid for pid in product_ids if pid not in products]
        if missing:
            message = "Products not found: " + ", ".join(str(pid) for pid in missing)
            logger.warning("Order creation failed: %s", message)
            raise NotFoundError("Product", message=message)

        total = Decimal("0")
        lines: List[Dict[str, Any]] = []
        for item in data.items:
            product = products[item.product_id]
            if item.quantity <= 0:
                raise ValidationError(f"Quantity must be greater than 0 for product {product.name}")
            price = Decimal(str(product.price))
            subtotal = price * item.quantity
            total += subtotal
            lines.append(
                {
                    "product_id": product.id,
                    "product_name": product.name,
                    "quantity": item.quantity,
                    "price_at_order": price,
                    "subtotal": subtotal,
                }
            )

        order = self.repository.create_with_items(data.user_id, total, lines)
        logger.info("Order created successfully id=%s total=%s", order.id, total)
        return order

    def update_order(self, id: uuid.UUID, data: schemas.OrderUpdate):
        values = data.model_dump(exclude_unset=True, exclude_none=True)
        status = values.get("status")
        if status is not None and status not in schemas.ORDER_STATUSES:
            logger.warning("Order update failed for %s: invalid status %s", id, status)
            raise ValidationError(f"Invalid order status: {status}")
        order = self.repository.update(id, values)
        logger.info("Order updated successfully id=%s", id)
        return order

    def delete_order(self, id: uuid.UUID) -> None:
        order = self.repository.find_by_id(id)
        if order.status not in schemas.DELETABLE_ORDER_STATUSES:
            logger.warning("Order delete refused for %s: status %s", id, order.status)
            raise ValidationError(
                f"Cannot delete order with status {order.status}. "
                "Only pending or cancelled orders can be deleted."
            )
        self.repository.delete(id)
        logger.info("Order deleted successfully id=%s", id)
