"""Restaurant and menu ORM Models (reference data for cart and checkout)"""

from uuid import uuid4

from sqlalchemy import Column, Integer, String, Text, DateTime, Boolean, Numeric, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ...db.models import Base


class RestaurantModel(Base):
    __tablename__ = 'restaurants'

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid4, index=True)
    owner_id = Column(Uuid(as_uuid=True), ForeignKey('users.id', ondelete='SET NULL'), nullable=True, index=True)
    name = Column(String(150), nullable=False)
    slug = Column(String(150), unique=True, nullable=False)
    description = Column(Text, nullable=True)
    logo_url = Column(String, nullable=True)
    address = Column(String, nullable=True)
    delivery_fee = Column(Numeric(10, 2), nullable=False, default=0)
    min_order_amount = Column(Numeric(10, 2), nullable=False, default=0)
    avg_delivery_time = Column(Integer, nullable=False, default=30)  # minutes
    is_active = Column(Boolean, default=True, nullable=False)
    is_open = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    categories = relationship('MenuCategoryModel', back_populates='restaurant', cascade='all, delete-orphan')
    menu_items = relationship('MenuItemModel', back_populates='restaurant', cascade='all, delete-orphan')


class MenuCategoryModel(Base):
    __tablename__ = 'menu_categories'

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid4, index=True)
    restaurant_id = Column(Uuid(as_uuid=True), ForeignKey('restaurants.id', ondelete='CASCADE'), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    sort_order = Column(Integer, default=0, nullable=False)

    restaurant = relationship('RestaurantModel', back_populates='categories')
    menu_items = relationship('MenuItemModel', back_populates='category')


class MenuItemModel(Base):
    __tablename__ = 'menu_items'

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid4, index=True)
    restaurant_id = Column(Uuid(as_uuid=True), ForeignKey('restaurants.id', ondelete='CASCADE'), nullable=False, index=True)
    category_id = Column(Uuid(as_uuid=True), ForeignKey('menu_categories.id', ondelete='SET NULL'), nullable=True)
    name = Column(String(150), nullable=False)
    description = Column(Text, nullable=True)
    image_url = Column(String, nullable=True)
    price = Column(Numeric(10, 2), nullable=False)
    discount_price = Column(Numeric(10, 2), nullable=True)
    is_available = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, server_default=func.now())

    restaurant = relationship('RestaurantModel', back_populates='menu_items')
    category = relationship('MenuCategoryModel', back_populates='menu_items')
    add_on_groups = relationship('AddOnGroupModel', back_populates='menu_item', cascade='all, delete-orphan')


class AddOnGroupModel(Base):
    __tablename__ = 'add_on_groups'

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid4, index=True)
    menu_item_id = Column(Uuid(as_uuid=True), ForeignKey('menu_items.id', ondelete='CASCADE'), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    is_required = Column(Boolean, default=False, nullable=False)
    max_selections = Column(Integer, default=1, nullable=False)

    menu_item = relationship('MenuItemModel', back_populates='add_on_groups')
    options = relationship('AddOnOptionModel', back_populates='group', cascade='all, delete-orphan')


class AddOnOptionModel(Base):
    __tablename__ = 'add_on_options'

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid4, index=True)
    group_id = Column(Uuid(as_uuid=True), ForeignKey('add_on_groups.id', ondelete='CASCADE'), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    price = Column(Numeric(10, 2), nullable=False, default=0)
    is_available = Column(Boolean, default=True, nullable=False)

    group = relationship('AddOnGroupModel', back_populates='options')
