"""Order repository implementation using SQLAlchemy ORM"""

from decimal import Decimal
from typing import Optional, List, Tuple
from uuid import UUID

from sqlalchemy import desc
from sqlalchemy.orm import Session

from ...domain.entities.order import (
    DeliveryLocation,
    Order,
    OrderLine,
    OrderLineAddOn,
    OrderPricing,
    PaymentTransaction,
)
from ...domain.repositories.order_repository import IOrderRepository
from ...domain.value_objects.entity_ids import OrderId, UserId
from ...domain.enums import OrderStatus, PaymentStatus
from ..orm.order_model import OrderModel, OrderItemModel, OrderItemAddOnModel, PaymentTransactionModel
from ..orm.restaurant_model import RestaurantModel
from .mappers import to_money, to_restaurant_summary


class OrderRepositoryImpl(IOrderRepository):
    """Repository implementation for Order aggregate"""

    def __init__(self, session: Session):
        self.session = session

    async def get_by_id(self, order_id: OrderId) -> Optional[Order]:
        model = self.session.query(OrderModel).filter(OrderModel.id == order_id.value).first()
        return self._map_to_entity(model) if model else None

    async def exists_by_order_number(self, order_number: str) -> bool:
        return self.session.query(OrderModel.id).filter(
            OrderModel.order_number == order_number
        ).first() is not None

    async def add(self, order: Order) -> Order:
        model = OrderModel(
            id=order.id.value,
            order_number=order.order_number,
            user_id=order.user_id.value,
            restaurant_id=order.restaurant.id,
            location_id=order.location.id if order.location else None,
            subtotal=order.pricing.subtotal.amount,
            delivery_fee=order.pricing.delivery_fee.amount,
            vat_percentage=order.pricing.vat_percentage,
            vat_amount=order.pricing.vat_amount.amount,
            total=order.pricing.total.amount,
            currency=order.pricing.total.currency,
            status=order.status,
            payment_status=order.payment_status,
            delivery_address=order.delivery_address,
            delivery_instructions=order.delivery_instructions,
            estimated_delivery_time=order.estimated_delivery_time,
            created_at=order.created_at,
            updated_at=order.updated_at,
            items=[
                OrderItemModel(
                    id=line.id,
                    menu_item_id=line.menu_item_id,
                    name=line.name,
                    price=line.price.amount,
                    quantity=line.quantity,
                    subtotal=line.subtotal.amount,
                    special_instructions=line.special_instructions,
                    add_ons=[
                        OrderItemAddOnModel(
                            id=add_on.id,
                            add_on_option_id=add_on.add_on_option_id,
                            name=add_on.name,
                            price=add_on.price.amount,
                            quantity=add_on.quantity,
                            subtotal=add_on.subtotal.amount,
                        )
                        for add_on in line.add_ons
                    ],
                )
                for line in order.items
            ],
        )
        self.session.add(model)
        self.session.flush()
        return order

    async def add_transaction(self, order_id: OrderId, transaction: PaymentTransaction) -> None:
        model = PaymentTransactionModel(
            id=transaction.id,
            order_id=order_id.value,
            payment_method_id=transaction.payment_method_id,
            amount=transaction.amount.amount,
            currency=transaction.amount.currency,
            status=transaction.status,
            transaction_ref=transaction.transaction_ref,
            processed_at=transaction.processed_at,
        )
        self.session.add(model)
        self.session.flush()

    async def update(self, order: Order) -> Order:
        existing = self.session.query(OrderModel).filter(OrderModel.id == order.id.value).first()
        if existing:
            self._update_model_from_entity(existing, order)
            self.session.flush()
        return order

    async def list_paginated(
        self,
        page: int,
        limit: int,
        user_id: Optional[UserId] = None,
        restaurant_owner_id: Optional[UUID] = None,
        status: Optional[OrderStatus] = None,
    ) -> Tuple[List[Order], int]:
        query = self.session.query(OrderModel)
        if user_id is not None:
            query = query.filter(OrderModel.user_id == user_id.value)
        if restaurant_owner_id is not None:
            query = query.join(RestaurantModel, OrderModel.restaurant_id == RestaurantModel.id).filter(
                RestaurantModel.owner_id == restaurant_owner_id
            )
        if status is not None:
            query = query.filter(OrderModel.status == status)

        total = query.count()
        offset = (page - 1) * limit
        models = query.order_by(desc(OrderModel.created_at)).offset(offset).limit(limit).all()
        return [self._map_to_entity(model) for model in models], total

    def _update_model_from_entity(self, model: OrderModel, order: Order) -> None:
        model.status = order.status
        model.payment_status = order.payment_status
        model.placed_at = order.placed_at
        model.confirmed_at = order.confirmed_at
        model.preparing_at = order.preparing_at
        model.out_for_delivery_at = order.out_for_delivery_at
        model.delivered_at = order.delivered_at
        model.cancelled_at = order.cancelled_at
        model.cancellation_reason = order.cancellation_reason
        model.updated_at = order.updated_at

    def _map_to_entity(self, model: OrderModel) -> Order:
        location = None
        if model.location is not None:
            loc = model.location
            location = DeliveryLocation(
                id=loc.id,
                label=loc.label,
                address=loc.address,
                apartment=loc.apartment,
                floor=loc.floor,
                building=loc.building,
                landmark=loc.landmark,
                latitude=loc.latitude,
                longitude=loc.longitude,
            )

        transaction = None
        if model.transaction is not None:
            tx = model.transaction
            transaction = PaymentTransaction(
                id=tx.id,
                payment_method_id=tx.payment_method_id,
                amount=to_money(tx.amount),
                status=PaymentStatus(tx.status),
                transaction_ref=tx.transaction_ref,
                processed_at=tx.processed_at,
            )

        items = [
            OrderLine(
                id=item.id,
                menu_item_id=item.menu_item_id,
                name=item.name,
                price=to_money(item.price),
                quantity=item.quantity,
                subtotal=to_money(item.subtotal),
                special_instructions=item.special_instructions,
                add_ons=[
                    OrderLineAddOn(
                        id=add_on.id,
                        add_on_option_id=add_on.add_on_option_id,
                        name=add_on.name,
                        price=to_money(add_on.price),
                        quantity=add_on.quantity,
                        subtotal=to_money(add_on.subtotal),
                    )
                    for add_on in item.add_ons
                ],
            )
            for item in model.items
        ]

        return Order(
            id=OrderId(model.id),
            order_number=model.order_number,
            user_id=UserId(model.user_id),
            restaurant=to_restaurant_summary(model.restaurant),
            location=location,
            pricing=OrderPricing(
                subtotal=to_money(model.subtotal),
                delivery_fee=to_money(model.delivery_fee),
                vat_percentage=Decimal(model.vat_percentage),
                vat_amount=to_money(model.vat_amount),
                total=to_money(model.total),
            ),
            delivery_address=model.delivery_address,
            status=OrderStatus(model.status),
            payment_status=PaymentStatus(model.payment_status),
            delivery_instructions=model.delivery_instructions,
            estimated_delivery_time=model.estimated_delivery_time,
            items=items,
            transaction=transaction,
            placed_at=model.placed_at,
            confirmed_at=model.confirmed_at,
            preparing_at=model.preparing_at,
            out_for_delivery_at=model.out_for_delivery_at,
            delivered_at=model.delivered_at,
            cancelled_at=model.cancelled_at,
            cancellation_reason=model.cancellation_reason,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
