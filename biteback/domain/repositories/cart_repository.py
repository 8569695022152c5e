"""Cart and menu repository interfaces"""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Tuple
from uuid import UUID

from ..entities.cart import Cart
from ..entities.menu import AddOnOptionInfo, MenuItemInfo
from ..value_objects.entity_ids import UserId


class ICartRepository(ABC):

    @abstractmethod
    async def get_for_user(self, user_id: UserId, lock: bool = False) -> Optional[Cart]:
        """Load the cart with lines, add-ons and restaurant data.

        ``lock`` takes a row lock on the cart for the rest of the transaction.
        """
        pass

    @abstractmethod
    async def get_or_create(self, user_id: UserId) -> Cart:
        pass

    @abstractmethod
    async def add_line(
        self,
        cart_id: UUID,
        menu_item_id: UUID,
        quantity: int,
        special_instructions: Optional[str],
        add_ons: Sequence[Tuple[UUID, int]],
    ) -> UUID:
        pass

    @abstractmethod
    async def line_belongs_to(self, line_id: UUID, user_id: UserId) -> bool:
        pass

    @abstractmethod
    async def update_line(
        self,
        line_id: UUID,
        quantity: Optional[int] = None,
        special_instructions: Optional[str] = None,
    ) -> None:
        pass

    @abstractmethod
    async def remove_line(self, line_id: UUID) -> None:
        pass

    @abstractmethod
    async def clear(self, cart_id: UUID) -> int:
        pass


class IMenuRepository(ABC):

    @abstractmethod
    async def get_available_item(self, menu_item_id: UUID) -> Optional[MenuItemInfo]:
        """Available item whose restaurant is active"""
        pass

    @abstractmethod
    async def get_available_add_ons(self, option_ids: List[UUID]) -> List[AddOnOptionInfo]:
        pass
