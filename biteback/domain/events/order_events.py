"""Order domain events"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..value_objects.money import Money
from ..value_objects.entity_ids import OrderId, UserId
from ..enums import OrderStatus


@dataclass(frozen=True)
class OrderPlaced:
    order_id: OrderId
    user_id: UserId
    order_number: str
    total: Money
    placed_at: datetime


@dataclass(frozen=True)
class OrderStatusChanged:
    order_id: OrderId
    user_id: UserId
    previous_status: OrderStatus
    new_status: OrderStatus
    changed_at: datetime


@dataclass(frozen=True)
class OrderCancelled:
    order_id: OrderId
    user_id: UserId
    reason: Optional[str]
