"""
Payment service.

Installments are only accepted for ``creditCard`` and ``installmentBooklet``
payments and must lie within ``[MIN_INSTALLMENTS, MAX_INSTALLMENTS]``.
"""
import logging
import uuid
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Optional

from storefront.db import schemas
from storefront.db.repositories.payments import PaymentRepository
from storefront.errors import NotFoundError, ValidationError
from storefront.utils.pagination import to_paginated

logger = logging.getLogger(__name__)


def validate_payment_type(type: str) -> None:
    if type not in schemas.PAYMENT_TYPES:
        raise ValidationError("Invalid payment type")


def parse_amount(amount: str) -> Decimal:
    try:
        value = Decimal(amount)
    except (InvalidOperation, TypeError):
        raise ValidationError("Amount must be greater than zero")
    if not value.is_finite() or value <= 0:
        raise ValidationError("Amount must be greater than zero")
    return value


def validate_installments(type: str, installments: Optional[int]) -> None:
    if installments is None:
        return
    if type not in schemas.INSTALLMENT_PAYMENT_TYPES:
        raise ValidationError(f"Installments not allowed for payment type: {type}")
    if not schemas.MIN_INSTALLMENTS <= installments <= schemas.MAX_INSTALLMENTS:
        raise ValidationError(
            f"Installments must be between {schemas.MIN_INSTALLMENTS} and {schemas.MAX_INSTALLMENTS}"
        )


class PaymentService:
    def __init__(self, repository: PaymentRepository):
        self.repository = repository

    def get_all_payments(self, page: int, limit: int) -> Dict[str, Any]:
        logger.debug("Fetching all payments page=%s limit=%s", page, limit)
        items, total = self.repository.find_all(page, limit)
        logger.info("Payments fetched successfully count=%s total=%s", len(items), total)
        return to_paginated(items, total, page, limit)

    def get_payment_by_id(self, id: uuid.UUID):
        logger.debug("Fetching payment by id %s", id)
        return self.repository.find_by_id(id)

    def get_payments_by_order_id(self, order_id: uuid.UUID):
        logger.debug("Fetching payments for order %s", order_id)
        return self.repository.find_by_order_id(order_id)

    def create_payment(self, data: schemas.PaymentCreate):
        logger.debug("Creating payment for order %s type=%s", data.order_id, data.type)
        try:
            validate_payment_type(data.type)
            amount = parse_amount(data.amount)
            validate_installments(data.type, data.installments)
        except ValidationError as exc:
            logger.warning("Payment creation failed: %s", exc.message)
            raise

        if not self.repository.order_exists(data.order_id):
            logger.warning("Payment creation failed: order %s not found", data.order_id)
            raise NotFoundError("Order", data.order_id)

        payment = self.repository.create(
            {
                "order_id": data.order_id,
                "type": data.type,
                "amount": amount,
                "status": "pending",
                "installments": data.installments,
                "transaction_id": data.transaction_id,
                "metadata_json": data.metadata,
            }
        )
        logger.info("Payment created successfully id=%s", payment.id)
        return payment

    def update_payment(self, id: uuid.UUID, data: schemas.PaymentUpdate):
        values = data.model_dump(exclude_unset=True, exclude_none=True)
        logger.debug("Updating payment %s fields=%s", id, sorted(values))
        status = values.get("status")
        if status is not None and status not in schemas.PAYMENT_STATUSES:
            logger.warning("Payment update failed for %s: invalid status %s", id, status)
            raise ValidationError("Invalid payment status")
        if "metadata" in values:
            values["metadata_json"] = values.pop("metadata")

        payment = self.repository.update(id, values)
        logger.info("Payment updated successfully id=%s", id)
        return payment

    def delete_payment(self, id: uuid.UUID) -> None:
        logger.debug("Deleting payment %s", id)
        self.repository.delete(id)
        logger.info("Payment deleted successfully id=%s", id)
