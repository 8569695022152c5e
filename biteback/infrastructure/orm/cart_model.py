"""Cart ORM Models"""

from uuid import uuid4

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ...db.models import Base


class CartModel(Base):
    __tablename__ = 'carts'

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid4, index=True)
    user_id = Column(Uuid(as_uuid=True), ForeignKey('users.id', ondelete='CASCADE'), unique=True, nullable=False)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    items = relationship(
        'CartItemModel',
        back_populates='cart',
        cascade='all, delete-orphan',
        order_by='CartItemModel.created_at',
    )


class CartItemModel(Base):
    __tablename__ = 'cart_items'

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid4, index=True)
    cart_id = Column(Uuid(as_uuid=True), ForeignKey('carts.id', ondelete='CASCADE'), nullable=False, index=True)
    menu_item_id = Column(Uuid(as_uuid=True), ForeignKey('menu_items.id', ondelete='CASCADE'), nullable=False)
    quantity = Column(Integer, nullable=False, default=1)
    special_instructions = Column(String(500), nullable=True)
    created_at = Column(DateTime, server_default=func.now())

    cart = relationship('CartModel', back_populates='items')
    menu_item = relationship('MenuItemModel')
    add_ons = relationship('CartItemAddOnModel', back_populates='cart_item', cascade='all, delete-orphan')


class CartItemAddOnModel(Base):
    __tablename__ = 'cart_item_add_ons'

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid4, index=True)
    cart_item_id = Column(Uuid(as_uuid=True), ForeignKey('cart_items.id', ondelete='CASCADE'), nullable=False, index=True)
    add_on_option_id = Column(Uuid(as_uuid=True), ForeignKey('add_on_options.id', ondelete='CASCADE'), nullable=False)
    quantity = Column(Integer, nullable=False, default=1)

    cart_item = relationship('CartItemModel', back_populates='add_ons')
    add_on_option = relationship('AddOnOptionModel')
