import uuid
from datetime import datetime
from typing import List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field

ORDER_STATUSES = ("pending", "confirmed", "shipped", "delivered", "cancelled")
# Orders in any other status are kept for bookkeeping
DELETABLE_ORDER_STATUSES = ("pending", "cancelled")

OrderStatus = Literal["pending", "confirmed", "shipped", "delivered", "cancelled"]


class OrderItemCreate(BaseModel):
    product_id: uuid.UUID
    quantity: int = Field(ge=1)


class OrderCreate(BaseModel):
    user_id: uuid.UUID
    items: List[OrderItemCreate] = Field(min_length=1)


class OrderUpdate(BaseModel):
    status: Optional[OrderStatus] = None


class OrderItem(BaseModel):
    id: uuid.UUID
    order_id: uuid.UUID
    product_id: Optional[uuid.UUID] = None
    product_name: str
    quantity: int
    price_at_order: float
    subtotal: float
    model_config = ConfigDict(from_attributes=True)


class Order(BaseModel):
    id: uuid.UUID
    user_id: uuid.UUID
    items: List[OrderItem] = Field(default_factory=list)
    total: float
    status: str
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)
