"""Cart read model with pricing rules"""

from dataclasses import dataclass, field
from typing import List, Optional
from uuid import UUID

from ..value_objects.entity_ids import UserId
from ..value_objects.money import Money


@dataclass(frozen=True)
class RestaurantSummary:
    id: UUID
    name: str
    owner_id: Optional[UUID]
    delivery_fee: Money
    min_order_amount: Money
    avg_delivery_time: int = 30
    logo_url: Optional[str] = None


@dataclass(frozen=True)
class CartLineAddOn:
    id: UUID
    add_on_option_id: UUID
    name: str
    price: Money
    quantity: int

    @property
    def subtotal(self) -> Money:
        return self.price * self.quantity


@dataclass(frozen=True)
class CartLine:
    id: UUID
    menu_item_id: UUID
    name: str
    unit_price: Money
    quantity: int
    restaurant: RestaurantSummary
    special_instructions: Optional[str] = None
    image_url: Optional[str] = None
    add_ons: List[CartLineAddOn] = field(default_factory=list)

    @property
    def add_ons_total(self) -> Money:
        return Money.sum((add_on.subtotal for add_on in self.add_ons), self.unit_price.currency)

    @property
    def line_total(self) -> Money:
        """(item price + sum of add-on price x quantity) x item quantity"""
        return (self.unit_price + self.add_ons_total) * self.quantity


@dataclass
class Cart:
    id: UUID
    user_id: UserId
    lines: List[CartLine] = field(default_factory=list)
    currency: str = "EGP"

    @property
    def is_empty(self) -> bool:
        return not self.lines

    @property
    def restaurant(self) -> Optional[RestaurantSummary]:
        # All lines belong to one restaurant; that is enforced when adding
        return self.lines[0].restaurant if self.lines else None

    @property
    def subtotal(self) -> Money:
        return Money.sum((line.line_total for line in self.lines), self.currency)

    @property
    def item_count(self) -> int:
        return len(self.lines)

    @property
    def total_quantity(self) -> int:
        return sum(line.quantity for line in self.lines)

    def accepts_restaurant(self, restaurant_id: UUID) -> bool:
        return self.restaurant is None or self.restaurant.id == restaurant_id
