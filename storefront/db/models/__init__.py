"""
Domain-split SQLAlchemy models.

Exposes `Base`, `now_utc`, and all ORM classes from a single import path.
"""

from .base import Base, now_utc  # re-export

from .users import User
from .products import Product, ProductSku
from .orders import Order, OrderItem
from .payments import Payment

__all__ = [
    # base
    "Base",
    "now_utc",
    # users
    "User",
    # catalog
    "Product",
    "ProductSku",
    # orders/payments
    "Order",
    "OrderItem",
    "Payment",
]
