"""
Request-scoped dependencies: pagination parameters and service factories.

Each factory builds its service over SQLAlchemy repositories bound to the
request's session, so tests can swap either the session (``get_db``) or a
whole service through ``app.dependency_overrides``.
"""
from dataclasses import dataclass

from fastapi import Depends, Query
from sqlalchemy.orm import Session

from storefront.db.database import get_db
from storefront.db.repositories import (
    SqlAlchemyHealthRepository,
    SqlAlchemyOrderRepository,
    SqlAlchemyPaymentRepository,
    SqlAlchemyProductRepository,
    SqlAlchemyProductSkuRepository,
    SqlAlchemyUserRepository,
)
from storefront.services.auth_service import AuthService
from storefront.services.health_service import HealthService
from storefront.services.order_service import OrderService
from storefront.services.payment_service import PaymentService
from storefront.services.product_service import ProductService
from storefront.services.product_sku_service import ProductSkuService
from storefront.services.user_service import UserService
from storefront.utils.pagination import DEFAULT_LIMIT, DEFAULT_PAGE, MAX_LIMIT


@dataclass(frozen=True)
class Pagination:
    page: int
    limit: int


def get_pagination(
    page: int = Query(default=DEFAULT_PAGE, ge=1),
    limit: int = Query(default=DEFAULT_LIMIT, ge=1, le=MAX_LIMIT),
) -> Pagination:
    return Pagination(page=page, limit=limit)


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(SqlAlchemyUserRepository(db))


def get_product_service(db: Session = Depends(get_db)) -> ProductService:
    return ProductService(SqlAlchemyProductRepository(db))


def get_product_sku_service(db: Session = Depends(get_db)) -> ProductSkuService:
    return ProductSkuService(SqlAlchemyProductSkuRepository(db))


def get_order_service(db: Session = Depends(get_db)) -> OrderService:
    return OrderService(
        SqlAlchemyOrderRepository(db),
        SqlAlchemyUserRepository(db),
        SqlAlchemyProductRepository(db),
    )


def get_payment_service(db: Session = Depends(get_db)) -> PaymentService:
    return PaymentService(SqlAlchemyPaymentRepository(db))


def get_health_service(db: Session = Depends(get_db)) -> HealthService:
    return HealthService(SqlAlchemyHealthRepository(db))


def get_auth_service(db: Session = Depends(get_db)) -> AuthService:
    return AuthService(SqlAlchemyUserRepository(db))
