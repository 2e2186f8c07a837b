"""
Repository layer.

Each module pairs a ``Protocol`` describing the storage operations a service
needs with its SQLAlchemy implementation.
"""

from .base import SqlAlchemyRepository, database_operation
from .users import UserRepository, SqlAlchemyUserRepository
from .products import ProductRepository, SqlAlchemyProductRepository
from .product_skus import ProductSkuRepository, SqlAlchemyProductSkuRepository
from .orders import OrderRepository, SqlAlchemyOrderRepository
from .payments import PaymentRepository, SqlAlchemyPaymentRepository
from .health import HealthRepository, SqlAlchemyHealthRepository

__all__ = [
    "SqlAlchemyRepository",
    "database_operation",
    "UserRepository",
    "SqlAlchemyUserRepository",
    "ProductRepository",
    "SqlAlchemyProductRepository",
    "ProductSkuRepository",
    "SqlAlchemyProductSkuRepository",
    "OrderRepository",
    "SqlAlchemyOrderRepository",
    "PaymentRepository",
    "SqlAlchemyPaymentRepository",
    "HealthRepository",
    "SqlAlchemyHealthRepository",
]
