"""User ORM Model"""

from uuid import uuid4

from sqlalchemy import Column, String, DateTime, Boolean, Uuid, Enum as SQLEnum
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ...db.models import Base
from ...domain.enums import UserRole


class UserModel(Base):
    __tablename__ = 'users'

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid4, index=True)
    email = Column(String(255), unique=True, index=True, nullable=False)
    phone = Column(String(20), unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    full_name = Column(String(100), nullable=False)
    avatar_url = Column(String, nullable=True)
    role = Column(SQLEnum(UserRole), default=UserRole.USER, nullable=False)
    is_phone_verified = Column(Boolean, default=False, nullable=False)
    is_email_verified = Column(Boolean, default=False, nullable=False)

    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    # Relationships
    refresh_tokens = relationship('RefreshTokenModel', back_populates='user')
    orders = relationship('OrderModel', back_populates='user')
    locations = relationship('LocationModel', back_populates='user')
    payment_methods = relationship('PaymentMethodModel', back_populates='user')
    notification_settings = relationship('NotificationSettingsModel', back_populates='user', uselist=False)
