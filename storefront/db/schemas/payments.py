import uuid
from datetime import datetime
from typing import Any, Dict, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field

PAYMENT_TYPES = ("pix", "creditCard", "debitCard", "cash", "installmentBooklet")
# Only these types may be split into installments
INSTALLMENT_PAYMENT_TYPES = ("creditCard", "installmentBooklet")
MIN_INSTALLMENTS = 1
MAX_INSTALLMENTS = 24
PAYMENT_STATUSES = ("pending", "processing", "completed", "failed", "cancelled", "refunded")

PaymentType = Literal["pix", "creditCard", "debitCard", "cash", "installmentBooklet"]
PaymentStatus = Literal["pending", "processing", "completed", "failed", "cancelled", "refunded"]


class PaymentCreate(BaseModel):
    order_id: uuid.UUID
    type: PaymentType
    amount: str = Field(pattern=r"^\d+(\.\d{1,2})?$")
    installments: Optional[int] = Field(default=None, ge=MIN_INSTALLMENTS, le=MAX_INSTALLMENTS)
    transaction_id: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None


class PaymentUpdate(BaseModel):
    status: Optional[PaymentStatus] = None
    transaction_id: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None


class Payment(BaseModel):
    id: uuid.UUID
    order_id: uuid.UUID
    type: str
    amount: float
    status: str
    installments: Optional[int] = None
    transaction_id: Optional[str] = None
    # ORM attribute is metadata_json; the column and the wire name are 'metadata'
    metadata: Optional[Dict[str, Any]] = Field(default=None, validation_alias="metadata_json")
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)
