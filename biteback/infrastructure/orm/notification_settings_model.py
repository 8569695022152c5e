"""Notification settings ORM Model"""

from uuid import uuid4

from sqlalchemy import Column, DateTime, Boolean, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ...db.models import Base


class NotificationSettingsModel(Base):
    __tablename__ = 'notification_settings'

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid4, index=True)
    user_id = Column(Uuid(as_uuid=True), ForeignKey('users.id', ondelete='CASCADE'), unique=True, nullable=False)
    push_notifications = Column(Boolean, default=True, nullable=False)
    sms_notifications = Column(Boolean, default=True, nullable=False)
    promotional_emails = Column(Boolean, default=False, nullable=False)
    order_updates = Column(Boolean, default=True, nullable=False)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    user = relationship('UserModel', back_populates='notification_settings')
