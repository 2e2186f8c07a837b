import uuid
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

from .common import UrlStr


class ProductSkuCreate(BaseModel):
    product_id: uuid.UUID
    name: str = Field(min_length=1)
    images: Optional[List[UrlStr]] = None


class ProductSkuUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    images: Optional[List[UrlStr]] = None


class ProductSku(BaseModel):
    id: uuid.UUID
    product_id: uuid.UUID
    name: str
    images: List[str] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)
