"""Order repository interface"""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from uuid import UUID

from ..entities.order import Order, PaymentTransaction
from ..enums import OrderStatus
from ..value_objects.entity_ids import OrderId, UserId


class IOrderRepository(ABC):

    @abstractmethod
    async def get_by_id(self, order_id: OrderId) -> Optional[Order]:
        pass

    @abstractmethod
    async def exists_by_order_number(self, order_number: str) -> bool:
        pass

    @abstractmethod
    async def add(self, order: Order) -> Order:
        """Persist the order header with its item and add-on snapshots"""
        pass

    @abstractmethod
    async def add_transaction(self, order_id: OrderId, transaction: PaymentTransaction) -> None:
        pass

    @abstractmethod
    async def update(self, order: Order) -> Order:
        pass

    @abstractmethod
    async def list_paginated(
        self,
        page: int,
        limit: int,
        user_id: Optional[UserId] = None,
        restaurant_owner_id: Optional[UUID] = None,
        status: Optional[OrderStatus] = None,
    ) -> Tuple[List[Order], int]:
        """Newest first. Filters are ANDed; returns (page items, total)."""
        pass
