"""Saved delivery location ORM Model"""

from uuid import uuid4

from sqlalchemy import Column, String, DateTime, Boolean, Float, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ...db.models import Base


class LocationModel(Base):
    __tablename__ = 'locations'

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid4, index=True)
    user_id = Column(Uuid(as_uuid=True), ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True)
    label = Column(String(50), nullable=False)
    address = Column(String(500), nullable=False)
    apartment = Column(String(20), nullable=True)
    floor = Column(String(20), nullable=True)
    building = Column(String(100), nullable=True)
    landmark = Column(String(200), nullable=True)
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)
    is_default = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    user = relationship('UserModel', back_populates='locations')
