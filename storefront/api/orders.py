"""
Orders API endpoints.

Orders are created from ``{"user_id", "items": [{"product_id", "quantity"}]}``;
prices are taken from the catalog at creation time.
"""
import uuid
from fastapi import APIRouter, Depends, status

from storefront.db import schemas
from storefront.api.deps import Pagination, get_order_service, get_pagination
from storefront.services.order_service import OrderService

router = APIRouter(prefix="/orders", tags=["orders"])


@router.get("", response_model=schemas.Page[schemas.Order])
def list_orders_endpoint(
    pagination: Pagination = Depends(get_pagination),
    service: OrderService = Depends(get_order_service),
):
    return service.get_all_orders(pagination.page, pagination.limit)


@router.get("/user/{user_id}", response_model=schemas.Page[schemas.Order])
def list_user_orders_endpoint(
    user_id: uuid.UUID,
    pagination: Pagination = Depends(get_pagination),
    service: OrderService = Depends(get_order_service),
):
    return service.get_orders_by_user_id(user_id, pagination.page, pagination.limit)


@router.get("/{order_id}", response_model=schemas.Envelope[schemas.Order])
def get_order_endpoint(order_id: uuid.UUID, service: OrderService = Depends(get_order_service)):
    return {"data": service.get_order_by_id(order_id)}


@router.post("", response_model=schemas.Envelope[schemas.Order], status_code=status.HTTP_201_CREATED)
def create_order_endpoint(order: schemas.OrderCreate, service: OrderService = Depends(get_order_service)):
    return {"data": service.create_order(order)}


@router.patch("/{order_id}", response_model=schemas.Envelope[schemas.Order])
def update_order_endpoint(
    order_id: uuid.UUID,
    order: schemas.OrderUpdate,
    service: OrderService = Depends(get_order_service),
):
    return {"data": service.update_order(order_id, order)}


@router.delete("/{order_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_order_endpoint(order_id: uuid.UUID, service: OrderService = Depends(get_order_service)):
    service.delete_order(order_id)
