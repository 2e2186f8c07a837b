import uuid
from sqlalchemy import Column, String, Text, Integer, Numeric, DateTime, ForeignKey, Index
from sqlalchemy.dialects.postgresql import UUID, JSONB
from sqlalchemy.orm import relationship
from .base import Base, now_utc


class Product(Base):
    __tablename__ = 'products'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String, nullable=False)
    reference = Column(String, nullable=True)
    description = Column(Text, nullable=True)
    quantity = Column(Integer, nullable=True)
    date = Column(DateTime(timezone=True), nullable=True)
    price = Column(Numeric(10, 2), nullable=False)
    old_price = Column(Numeric(10, 2), nullable=True)
    # resolution -> image url, e.g. {"720p": "https://..."}
    images = Column(JSONB, nullable=False, default=dict)
    # [{"installment": 3, "fee": 1.5}, ...]
    installments = Column(JSONB, nullable=True)
    created_at = Column(DateTime(timezone=True), default=now_utc, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=now_utc, onupdate=now_utc, nullable=False)

    skus = relationship("ProductSku", back_populates="product", cascade="all, delete-orphan", passive_deletes=True)


class ProductSku(Base):
    __tablename__ = 'product_skus'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    product_id = Column(UUID(as_uuid=True), ForeignKey('products.id', ondelete='CASCADE'), nullable=False)
    name = Column(String, nullable=False)
    images = Column(JSONB, nullable=False, default=list)
    created_at = Column(DateTime(timezone=True), default=now_utc, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=now_utc, onupdate=now_utc, nullable=False)

    product = relationship("Product", back_populates="skus")

    __table_args__ = (
        Index('ix_product_skus_product_id', 'product_id'),
    )
