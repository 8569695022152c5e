"""Cart DTOs"""

from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from ...domain.entities.cart import Cart, CartLine, RestaurantSummary


class AddOnSelectionDto(BaseModel):
    add_on_option_id: UUID
    quantity: int = Field(default=1, ge=1, le=20)


class AddCartItemDto(BaseModel):
    menu_item_id: UUID
    quantity: int = Field(default=1, ge=1, le=99)
    special_instructions: Optional[str] = Field(default=None, max_length=500)
    add_ons: List[AddOnSelectionDto] = Field(default_factory=list)


class UpdateCartItemDto(BaseModel):
    quantity: Optional[int] = Field(default=None, ge=1, le=99)
    special_instructions: Optional[str] = Field(default=None, max_length=500)


class RestaurantSummaryDto(BaseModel):
    id: UUID
    name: str
    logo_url: Optional[str] = None
    delivery_fee: Decimal
    min_order_amount: Decimal
    avg_delivery_time: int

    @classmethod
    def from_entity(cls, restaurant: RestaurantSummary) -> 'RestaurantSummaryDto':
        return cls(
            id=restaurant.id,
            name=restaurant.name,
            logo_url=restaurant.logo_url,
            delivery_fee=restaurant.delivery_fee.amount,
            min_order_amount=restaurant.min_order_amount.amount,
            avg_delivery_time=restaurant.avg_delivery_time,
        )


class CartAddOnDto(BaseModel):
    id: UUID
    add_on_option_id: UUID
    name: str
    price: Decimal
    quantity: int
    subtotal: Decimal


class CartItemDto(BaseModel):
    id: UUID
    menu_item_id: UUID
    name: str
    image_url: Optional[str] = None
    unit_price: Decimal
    quantity: int
    special_instructions: Optional[str] = None
    add_ons: List[CartAddOnDto]
    add_ons_total: Decimal
    line_total: Decimal

    @classmethod
    def from_entity(cls, line: CartLine) -> 'CartItemDto':
        return cls(
            id=line.id,
            menu_item_id=line.menu_item_id,
            name=line.name,
            image_url=line.image_url,
            unit_price=line.unit_price.amount,
            quantity=line.quantity,
            special_instructions=line.special_instructions,
            add_ons=[
                CartAddOnDto(
                    id=add_on.id,
                    add_on_option_id=add_on.add_on_option_id,
                    name=add_on.name,
                    price=add_on.price.amount,
                    quantity=add_on.quantity,
                    subtotal=add_on.subtotal.amount,
                )
                for add_on in line.add_ons
            ],
            add_ons_total=line.add_ons_total.amount,
            line_total=line.line_total.amount,
        )


class CartDto(BaseModel):
    id: UUID
    restaurant: Optional[RestaurantSummaryDto] = None
    items: List[CartItemDto]
    subtotal: Decimal
    item_count: int
    total_quantity: int
    currency: str

    @classmethod
    def from_entity(cls, cart: Cart) -> 'CartDto':
        return cls(
            id=cart.id,
            restaurant=RestaurantSummaryDto.from_entity(cart.restaurant) if cart.restaurant else None,
            items=[CartItemDto.from_entity(line) for line in cart.lines],
            subtotal=cart.subtotal.amount,
            item_count=cart.item_count,
            total_quantity=cart.total_quantity,
            currency=cart.currency,
        )
