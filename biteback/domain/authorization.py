"""Order capability checks.

Every mutating order operation calls into here before touching state, so the
rules live in one place instead of being spread across routes.
"""

from dataclasses import dataclass
from uuid import UUID

from .entities.order import Order
from .enums import OrderStatus, UserRole
from ..core.exceptions import BadRequestError, ForbiddenError


@dataclass(frozen=True)
class CurrentUser:
    """What the inbound auth gate hands to handlers."""
    id: UUID
    email: str
    role: UserRole
    is_phone_verified: bool

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN


def can_view_order(actor: CurrentUser, order: Order) -> bool:
    if actor.role == UserRole.ADMIN:
        return True
    if actor.role == UserRole.RESTAURANT_OWNER:
        return order.restaurant.owner_id == actor.id
    return order.user_id.value == actor.id


def ensure_can_view_order(actor: CurrentUser, order: Order) -> None:
    if not can_view_order(actor, order):
        raise ForbiddenError("Access denied")


def ensure_can_change_status(actor: CurrentUser, order: Order, new_status: OrderStatus) -> None:
    """Plain users may only cancel their own PLACED orders; owners may move
    orders of restaurants they own; admins may set any status."""
    if actor.role == UserRole.ADMIN:
        return

    if actor.role == UserRole.RESTAURANT_OWNER:
        if order.restaurant.owner_id != actor.id:
            raise ForbiddenError("Access denied")
        return

    if order.user_id.value != actor.id:
        raise ForbiddenError("Access denied")
    if new_status != OrderStatus.CANCELLED:
        raise ForbiddenError("Users can only cancel orders")
    if order.status != OrderStatus.PLACED:
        raise BadRequestError("Order cannot be cancelled at this stage")
