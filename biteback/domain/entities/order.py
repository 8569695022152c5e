"""Order entity with business logic"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Optional, List
from uuid import UUID, uuid4

from .cart import Cart, RestaurantSummary
from ..value_objects.money import Money
from ..value_objects.entity_ids import OrderId, UserId
from ..enums import OrderStatus, PaymentStatus
from ..events.order_events import OrderPlaced, OrderStatusChanged, OrderCancelled


# Status -> timestamp attribute stamped when the order enters that status
STATUS_TIMESTAMPS = {
    OrderStatus.PLACED: "placed_at",
    OrderStatus.CONFIRMED: "confirmed_at",
    OrderStatus.PREPARING: "preparing_at",
    OrderStatus.OUT_FOR_DELIVERY: "out_for_delivery_at",
    OrderStatus.DELIVERED: "delivered_at",
    OrderStatus.CANCELLED: "cancelled_at",
}


@dataclass(frozen=True)
class OrderPricing:
    subtotal: Money
    delivery_fee: Money
    vat_percentage: Decimal
    vat_amount: Money
    total: Money

    @classmethod
    def compute(cls, subtotal: Money, delivery_fee: Money, vat_percentage: Decimal) -> 'OrderPricing':
        """vat = subtotal x vat% / 100 (to the cent); total = subtotal + fee + vat"""
        subtotal = subtotal.rounded()
        delivery_fee = delivery_fee.rounded()
        vat_amount = subtotal.percentage(vat_percentage)
        return cls(
            subtotal=subtotal,
            delivery_fee=delivery_fee,
            vat_percentage=Decimal(vat_percentage),
            vat_amount=vat_amount,
            total=subtotal + delivery_fee + vat_amount,
        )


@dataclass(frozen=True)
class OrderLineAddOn:
    add_on_option_id: Optional[UUID]
    name: str
    price: Money
    quantity: int
    subtotal: Money
    id: UUID = field(default_factory=uuid4)


@dataclass(frozen=True)
class OrderLine:
    menu_item_id: Optional[UUID]
    name: str
    price: Money
    quantity: int
    subtotal: Money
    special_instructions: Optional[str] = None
    add_ons: List[OrderLineAddOn] = field(default_factory=list)
    id: UUID = field(default_factory=uuid4)


@dataclass(frozen=True)
class DeliveryLocation:
    id: UUID
    label: str
    address: str
    apartment: Optional[str] = None
    floor: Optional[str] = None
    building: Optional[str] = None
    landmark: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    @property
    def full_address(self) -> str:
        parts = [self.address]
        if self.building:
            parts.append(self.building)
        if self.floor:
            parts.append(f"Floor {self.floor}")
        if self.apartment:
            parts.append(f"Apt {self.apartment}")
        return ", ".join(parts)


@dataclass(frozen=True)
class PaymentTransaction:
    payment_method_id: Optional[UUID]
    amount: Money
    status: PaymentStatus
    transaction_ref: str
    processed_at: Optional[datetime] = None
    id: UUID = field(default_factory=uuid4)


@dataclass
class Order:
    id: OrderId
    order_number: str
    user_id: UserId
    restaurant: RestaurantSummary
    location: Optional[DeliveryLocation]
    pricing: OrderPricing
    delivery_address: str
    status: OrderStatus = OrderStatus.PENDING_PAYMENT
    payment_status: PaymentStatus = PaymentStatus.PENDING
    delivery_instructions: Optional[str] = None
    estimated_delivery_time: Optional[datetime] = None
    items: List[OrderLine] = field(default_factory=list)
    transaction: Optional[PaymentTransaction] = None

    placed_at: Optional[datetime] = None
    confirmed_at: Optional[datetime] = None
    preparing_at: Optional[datetime] = None
    out_for_delivery_at: Optional[datetime] = None
    delivered_at: Optional[datetime] = None
    cancelled_at: Optional[datetime] = None
    cancellation_reason: Optional[str] = None

    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    # Domain events
    _events: List = field(default_factory=list, init=False)

    @classmethod
    def from_cart(
        cls,
        cart: Cart,
        order_number: str,
        location: DeliveryLocation,
        pricing: OrderPricing,
        delivery_instructions: Optional[str] = None,
    ) -> 'Order':
        """Snapshot a cart into a new order awaiting payment.

        Item names and prices are copied so later menu edits never change
        historical orders.
        """
        if cart.is_empty or cart.restaurant is None:
            raise ValueError("Cannot create an order from an empty cart")

        lines = []
        for line in cart.lines:
            add_ons = [
                OrderLineAddOn(
                    add_on_option_id=add_on.add_on_option_id,
                    name=add_on.name,
                    price=add_on.price,
                    quantity=add_on.quantity,
                    subtotal=add_on.subtotal,
                )
                for add_on in line.add_ons
            ]
            lines.append(OrderLine(
                menu_item_id=line.menu_item_id,
                name=line.name,
                price=line.unit_price,
                quantity=line.quantity,
                subtotal=line.line_total,
                special_instructions=line.special_instructions,
                add_ons=add_ons,
            ))

        now = datetime.utcnow()
        restaurant = cart.restaurant
        return cls(
            id=OrderId.generate(),
            order_number=order_number,
            user_id=cart.user_id,
            restaurant=restaurant,
            location=location,
            pricing=pricing,
            delivery_address=location.full_address,
            delivery_instructions=delivery_instructions,
            estimated_delivery_time=now + timedelta(minutes=restaurant.avg_delivery_time or 30),
            items=lines,
            created_at=now,
            updated_at=now,
        )

    def mark_placed(self, transaction: PaymentTransaction) -> None:
        """Business logic: payment captured, hand the order to the restaurant"""
        if self.status != OrderStatus.PENDING_PAYMENT:
            raise ValueError(f"Cannot place order with status: {self.status.value}")
        if transaction.status != PaymentStatus.PAID:
            raise ValueError("Cannot place an order without a successful payment")

        now = datetime.utcnow()
        self.transaction = transaction
        self.status = OrderStatus.PLACED
        self.payment_status = PaymentStatus.PAID
        self.placed_at = now
        self.updated_at = now

        self._events.append(OrderPlaced(
            order_id=self.id,
            user_id=self.user_id,
            order_number=self.order_number,
            total=self.pricing.total,
            placed_at=now
        ))

    def change_status(self, new_status: OrderStatus, reason: Optional[str] = None) -> None:
        """Business logic: move to ``new_status`` and stamp its timestamp.

        Who may request which transition is decided by ``domain.authorization``.
        """
        previous = self.status
        now = datetime.utcnow()
        self.status = new_status
        self.updated_at = now

        attribute = STATUS_TIMESTAMPS.get(new_status)
        if attribute:
            setattr(self, attribute, now)

        if new_status == OrderStatus.CANCELLED:
            self.cancellation_reason = reason
            self._events.append(OrderCancelled(
                order_id=self.id,
                user_id=self.user_id,
                reason=reason
            ))
        else:
            self._events.append(OrderStatusChanged(
                order_id=self.id,
                user_id=self.user_id,
                previous_status=previous,
                new_status=new_status,
                changed_at=now
            ))

    @property
    def is_paid(self) -> bool:
        return self.payment_status == PaymentStatus.PAID

    @property
    def item_count(self) -> int:
        return len(self.items)

    def get_events(self) -> List:
        """Get and clear domain events"""
        events = self._events.copy()
        self._events.clear()
        return events
