"""
Payments API endpoints.
"""
import uuid
from typing import List
from fastapi import APIRouter, Depends, status

from storefront.db import schemas
from storefront.api.deps import Pagination, get_pagination, get_payment_service
from storefront.services.payment_service import PaymentService

router = APIRouter(prefix="/payments", tags=["payments"])


@router.get("", response_model=schemas.Page[schemas.Payment])
def list_payments_endpoint(
    pagination: Pagination = Depends(get_pagination),
    service: PaymentService = Depends(get_payment_service),
):
    return service.get_all_payments(pagination.page, pagination.limit)


@router.get("/order/{order_id}", response_model=schemas.Envelope[List[schemas.Payment]])
def list_order_payments_endpoint(order_id: uuid.UUID, service: PaymentService = Depends(get_payment_service)):
    return {"data": service.get_payments_by_order_id(order_id)}


@router.get("/{payment_id}", response_model=schemas.Envelope[schemas.Payment])
def get_payment_endpoint(payment_id: uuid.UUID, service: PaymentService = Depends(get_payment_service)):
    return {"data": service.get_payment_by_id(payment_id)}


@router.post("", response_model=schemas.Envelope[schemas.Payment], status_code=status.HTTP_201_CREATED)
def create_payment_endpoint(payment: schemas.PaymentCreate, service: PaymentService = Depends(get_payment_service)):
    return {"data": service.create_payment(payment)}


@router.patch("/{payment_id}", response_model=schemas.Envelope[schemas.Payment])
def update_payment_endpoint(
    payment_id: uuid.UUID,
    payment: schemas.PaymentUpdate,
    service: PaymentService = Depends(get_payment_service),
):
    return {"data": service.update_payment(payment_id, payment)}


@router.delete("/{payment_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_payment_endpoint(payment_id: uuid.UUID, service: PaymentService = Depends(get_payment_service)):
    service.delete_payment(payment_id)
