"""Order DTOs for API layer"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from ...domain.entities.order import Order
from ...domain.enums import OrderStatus, PaymentStatus
from .cart_dtos import RestaurantSummaryDto


class CheckoutDto(BaseModel):
    """DTO for placing an order from the current cart"""
    payment_method_id: UUID
    delivery_location_id: UUID
    delivery_instructions: Optional[str] = Field(default=None, max_length=500)


class UpdateOrderStatusDto(BaseModel):
    status: OrderStatus
    cancellation_reason: Optional[str] = Field(default=None, max_length=500)


class OrderItemAddOnDto(BaseModel):
    id: UUID
    add_on_option_id: Optional[UUID] = None
    name: str
    price: Decimal
    quantity: int
    subtotal: Decimal


class OrderItemDto(BaseModel):
    id: UUID
    menu_item_id: Optional[UUID] = None
    name: str
    price: Decimal
    quantity: int
    subtotal: Decimal
    special_instructions: Optional[str] = None
    add_ons: List[OrderItemAddOnDto]


class PaymentTransactionDto(BaseModel):
    id: UUID
    payment_method_id: Optional[UUID] = None
    amount: Decimal
    status: PaymentStatus
    transaction_ref: Optional[str] = None
    processed_at: Optional[datetime] = None


class OrderDto(BaseModel):
    """DTO for order response"""
    id: UUID
    order_number: str
    user_id: UUID
    restaurant: RestaurantSummaryDto
    location_id: Optional[UUID] = None
    status: OrderStatus
    payment_status: PaymentStatus
    subtotal: Decimal
    delivery_fee: Decimal
    vat_percentage: Decimal
    vat_amount: Decimal
    total: Decimal
    currency: str
    delivery_address: str
    delivery_instructions: Optional[str] = None
    estimated_delivery_time: Optional[datetime] = None
    items: List[OrderItemDto]
    transaction: Optional[PaymentTransactionDto] = None
    placed_at: Optional[datetime] = None
    confirmed_at: Optional[datetime] = None
    preparing_at: Optional[datetime] = None
    out_for_delivery_at: Optional[datetime] = None
    delivered_at: Optional[datetime] = None
    cancelled_at: Optional[datetime] = None
    cancellation_reason: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, order: Order) -> 'OrderDto':
        pricing = order.pricing
        transaction = None
        if order.transaction is not None:
            tx = order.transaction
            transaction = PaymentTransactionDto(
                id=tx.id,
                payment_method_id=tx.payment_method_id,
                amount=tx.amount.amount,
                status=tx.status,
                transaction_ref=tx.transaction_ref,
                processed_at=tx.processed_at,
            )
        return cls(
            id=order.id.value,
            order_number=order.order_number,
            user_id=order.user_id.value,
            restaurant=RestaurantSummaryDto.from_entity(order.restaurant),
            location_id=order.location.id if order.location else None,
            status=order.status,
            payment_status=order.payment_status,
            subtotal=pricing.subtotal.amount,
            delivery_fee=pricing.delivery_fee.amount,
            vat_percentage=pricing.vat_percentage,
            vat_amount=pricing.vat_amount.amount,
            total=pricing.total.amount,
            currency=pricing.total.currency,
            delivery_address=order.delivery_address,
            delivery_instructions=order.delivery_instructions,
            estimated_delivery_time=order.estimated_delivery_time,
            items=[
                OrderItemDto(
                    id=line.id,
                    menu_item_id=line.menu_item_id,
                    name=line.name,
                    price=line.price.amount,
                    quantity=line.quantity,
                    subtotal=line.subtotal.amount,
                    special_instructions=line.special_instructions,
                    add_ons=[
                        OrderItemAddOnDto(
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
            transaction=transaction,
            placed_at=order.placed_at,
            confirmed_at=order.confirmed_at,
            preparing_at=order.preparing_at,
            out_for_delivery_at=order.out_for_delivery_at,
            delivered_at=order.delivered_at,
            cancelled_at=order.cancelled_at,
            cancellation_reason=order.cancellation_reason,
            created_at=order.created_at,
            updated_at=order.updated_at,
        )
