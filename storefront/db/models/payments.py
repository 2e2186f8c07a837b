import uuid
from sqlalchemy import Column, String, Integer, Numeric, DateTime, ForeignKey, Index
from sqlalchemy.dialects.postgresql import UUID, JSONB
from .base import Base, now_utc


class Payment(Base):
    __tablename__ = 'payments'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    order_id = Column(UUID(as_uuid=True), ForeignKey('orders.id', ondelete='CASCADE'), nullable=False)
    # 'pix'|'creditCard'|'debitCard'|'cash'|'installmentBooklet'
    type = Column(String(32), nullable=False)
    amount = Column(Numeric(10, 2), nullable=False)
    # 'pending'|'processing'|'completed'|'failed'|'cancelled'|'refunded'
    status = Column(String(20), nullable=False, default='pending')
    installments = Column(Integer, nullable=True)
    transaction_id = Column(String, nullable=True)
    # Use a non-reserved Python attribute name while keeping DB column name 'metadata'
    metadata_json = Column('metadata', JSONB, nullable=True)
    created_at = Column(DateTime(timezone=True), default=now_utc, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=now_utc, onupdate=now_utc, nullable=False)

    __table_args__ = (
        Index('ix_payments_order_id', 'order_id'),
    )
