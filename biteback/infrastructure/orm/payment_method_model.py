"""Saved payment method ORM Model"""

from uuid import uuid4

from sqlalchemy import Column, Integer, String, DateTime, Boolean, ForeignKey, Uuid, Enum as SQLEnum
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ...db.models import Base
from ...domain.enums import PaymentMethodType


class PaymentMethodModel(Base):
    __tablename__ = 'payment_methods'

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid4, index=True)
    user_id = Column(Uuid(as_uuid=True), ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True)
    type = Column(SQLEnum(PaymentMethodType), nullable=False)
    card_token = Column(String(100), nullable=False)
    last_four_digits = Column(String(4), nullable=False)
    card_brand = Column(String(20), nullable=False)
    expiry_month = Column(Integer, nullable=False)
    expiry_year = Column(Integer, nullable=False)
    is_default = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, server_default=func.now())

    user = relationship('UserModel', back_populates='payment_methods')
