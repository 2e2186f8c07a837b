import uuid
from datetime import datetime
from decimal import Decimal
from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field

from .common import UrlStr


class InstallmentOption(BaseModel):
    installment: int = Field(ge=1)
    fee: Optional[float] = Field(default=None, ge=0)


class ProductCreate(BaseModel):
    name: str = Field(min_length=1)
    reference: Optional[str] = None
    description: Optional[str] = None
    quantity: Optional[int] = None
    date: Optional[datetime] = None
    price: Decimal = Field(max_digits=10, decimal_places=2)
    old_price: Optional[Decimal] = Field(default=None, max_digits=10, decimal_places=2)
    images: Optional[Dict[str, UrlStr]] = None
    installments: Optional[List[InstallmentOption]] = None


class ProductUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    reference: Optional[str] = None
    description: Optional[str] = None
    quantity: Optional[int] = None
    date: Optional[datetime] = None
    price: Optional[Decimal] = Field(default=None, max_digits=10, decimal_places=2)
    images: Optional[Dict[str, UrlStr]] = None
    installments: Optional[List[InstallmentOption]] = None


class ProductImagesAdd(BaseModel):
    images: Dict[str, UrlStr]


class ProductImageDelete(BaseModel):
    resolution: str


class Product(BaseModel):
    id: uuid.UUID
    name: str
    reference: Optional[str] = None
    description: Optional[str] = None
    quantity: Optional[int] = None
    date: Optional[datetime] = None
    price: float
    old_price: Optional[float] = None
    images: Dict[str, str] = Field(default_factory=dict)
    installments: Optional[List[InstallmentOption]] = None
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)
