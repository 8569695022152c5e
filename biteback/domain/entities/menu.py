"""Menu reference data consumed by the cart"""

from dataclasses import dataclass
from uuid import UUID

from ..value_objects.money import Money


@dataclass(frozen=True)
class MenuItemInfo:
    id: UUID
    name: str
    restaurant_id: UUID
    price: Money


@dataclass(frozen=True)
class AddOnOptionInfo:
    id: UUID
    menu_item_id: UUID
    name: str
    price: Money
