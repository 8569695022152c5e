"""Order ORM Models"""

from uuid import uuid4

from sqlalchemy import Column, Integer, String, DateTime, Numeric, ForeignKey, Uuid, Enum as SQLEnum
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ...db.models import Base
from ...domain.enums import OrderStatus, PaymentStatus


class OrderModel(Base):
    __tablename__ = 'orders'

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid4, index=True)
    order_number = Column(String(40), unique=True, nullable=False, index=True)
    user_id = Column(Uuid(as_uuid=True), ForeignKey('users.id'), nullable=False, index=True)
    restaurant_id = Column(Uuid(as_uuid=True), ForeignKey('restaurants.id'), nullable=False, index=True)
    location_id = Column(Uuid(as_uuid=True), ForeignKey('locations.id', ondelete='SET NULL'), nullable=True)

    # Pricing, all in the order currency
    subtotal = Column(Numeric(10, 2), nullable=False)
    delivery_fee = Column(Numeric(10, 2), nullable=False)
    vat_percentage = Column(Numeric(5, 2), nullable=False)
    vat_amount = Column(Numeric(10, 2), nullable=False)
    total = Column(Numeric(10, 2), nullable=False)
    currency = Column(String(3), default='EGP', nullable=False)

    status = Column(SQLEnum(OrderStatus), default=OrderStatus.PENDING_PAYMENT, nullable=False, index=True)
    payment_status = Column(SQLEnum(PaymentStatus), default=PaymentStatus.PENDING, nullable=False)

    # Delivery snapshot
    delivery_address = Column(String, nullable=False)
    delivery_instructions = Column(String(500), nullable=True)
    estimated_delivery_time = Column(DateTime, nullable=True)

    # Status timestamps
    placed_at = Column(DateTime, nullable=True)
    confirmed_at = Column(DateTime, nullable=True)
    preparing_at = Column(DateTime, nullable=True)
    out_for_delivery_at = Column(DateTime, nullable=True)
    delivered_at = Column(DateTime, nullable=True)
    cancelled_at = Column(DateTime, nullable=True)
    cancellation_reason = Column(String(500), nullable=True)

    created_at = Column(DateTime, server_default=func.now(), index=True)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    # Relationships
    user = relationship('UserModel', back_populates='orders')
    restaurant = relationship('RestaurantModel')
    location = relationship('LocationModel')
    items = relationship('OrderItemModel', back_populates='order', cascade='all, delete-orphan')
    transaction = relationship('PaymentTransactionModel', back_populates='order', uselist=False)


class OrderItemModel(Base):
    __tablename__ = 'order_items'

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid4, index=True)
    order_id = Column(Uuid(as_uuid=True), ForeignKey('orders.id', ondelete='CASCADE'), nullable=False, index=True)
    menu_item_id = Column(Uuid(as_uuid=True), ForeignKey('menu_items.id', ondelete='SET NULL'), nullable=True)
    name = Column(String(150), nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    quantity = Column(Integer, nullable=False)
    subtotal = Column(Numeric(10, 2), nullable=False)
    special_instructions = Column(String(500), nullable=True)

    order = relationship('OrderModel', back_populates='items')
    add_ons = relationship('OrderItemAddOnModel', back_populates='order_item', cascade='all, delete-orphan')


class OrderItemAddOnModel(Base):
    __tablename__ = 'order_item_add_ons'

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid4, index=True)
    order_item_id = Column(Uuid(as_uuid=True), ForeignKey('order_items.id', ondelete='CASCADE'), nullable=False, index=True)
    add_on_option_id = Column(Uuid(as_uuid=True), ForeignKey('add_on_options.id', ondelete='SET NULL'), nullable=True)
    name = Column(String(100), nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    quantity = Column(Integer, nullable=False)
    subtotal = Column(Numeric(10, 2), nullable=False)

    order_item = relationship('OrderItemModel', back_populates='add_ons')


class PaymentTransactionModel(Base):
    __tablename__ = 'payment_transactions'

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid4, index=True)
    order_id = Column(Uuid(as_uuid=True), ForeignKey('orders.id', ondelete='CASCADE'), unique=True, nullable=False)
    payment_method_id = Column(Uuid(as_uuid=True), ForeignKey('payment_methods.id', ondelete='SET NULL'), nullable=True, index=True)
    amount = Column(Numeric(10, 2), nullable=False)
    currency = Column(String(3), default='EGP', nullable=False)
    status = Column(SQLEnum(PaymentStatus), default=PaymentStatus.PENDING, nullable=False)
    transaction_ref = Column(String(100), nullable=True)
    processed_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, server_default=func.now())

    order = relationship('OrderModel', back_populates='transaction')
