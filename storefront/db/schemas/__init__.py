"""
Domain-split Pydantic schemas with a single aggregator.

Request bodies are the *Create/*Update models; response bodies wrap the
entity models in `Envelope` or `Page`.
"""

from .common import UrlStr, PageMeta, Page, Envelope, ErrorResponse
from .users import UserBase, UserCreate, UserUpdate, User
from .products import (
    InstallmentOption,
    ProductCreate,
    ProductUpdate,
    ProductImagesAdd,
    ProductImageDelete,
    Product,
)
from .product_skus import ProductSkuCreate, ProductSkuUpdate, ProductSku
from .orders import (
    ORDER_STATUSES,
    DELETABLE_ORDER_STATUSES,
    OrderStatus,
    OrderItemCreate,
    OrderCreate,
    OrderUpdate,
    OrderItem,
    Order,
)
from .payments import (
    PAYMENT_TYPES,
    INSTALLMENT_PAYMENT_TYPES,
    MIN_INSTALLMENTS,
    MAX_INSTALLMENTS,
    PAYMENT_STATUSES,
    PaymentType,
    PaymentStatus,
    PaymentCreate,
    PaymentUpdate,
    Payment,
)
from .auth import AuthorizationUrl, GoogleUserInfo, AuthSession, AuthCallbackResult
from .health import DatabaseHealth, HealthStatus

__all__ = [
    # common
    "UrlStr",
    "PageMeta",
    "Page",
    "Envelope",
    "ErrorResponse",
    # users
    "UserBase",
    "UserCreate",
    "UserUpdate",
    "User",
    # catalog
    "InstallmentOption",
    "ProductCreate",
    "ProductUpdate",
    "ProductImagesAdd",
    "ProductImageDelete",
    "Product",
    "ProductSkuCreate",
    "ProductSkuUpdate",
    "ProductSku",
    # orders
    "ORDER_STATUSES",
    "DELETABLE_ORDER_STATUSES",
    "OrderStatus",
    "OrderItemCreate",
    "OrderCreate",
    "OrderUpdate",
    "OrderItem",
    "Order",
    # payments
    "PAYMENT_TYPES",
    "INSTALLMENT_PAYMENT_TYPES",
    "MIN_INSTALLMENTS",
    "MAX_INSTALLMENTS",
    "PAYMENT_STATUSES",
    "PaymentType",
    "PaymentStatus",
    "PaymentCreate",
    "PaymentUpdate",
    "Payment",
    # auth
    "AuthorizationUrl",
    "GoogleUserInfo",
    "AuthSession",
    "AuthCallbackResult",
    # health
    "DatabaseHealth",
    "HealthStatus",
]
