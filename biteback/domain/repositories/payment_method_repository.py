"""Saved payment method repository interface"""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from ..entities.payment_method import PaymentMethod
from ..value_objects.entity_ids import UserId


class IPaymentMethodRepository(ABC):

    @abstractmethod
    async def list_for_user(self, user_id: UserId) -> List[PaymentMethod]:
        pass

    @abstractmethod
    async def get_for_user(self, payment_method_id: UUID, user_id: UserId) -> Optional[PaymentMethod]:
        pass

    @abstractmethod
    async def count_for_user(self, user_id: UserId) -> int:
        pass

    @abstractmethod
    async def add(self, payment_method: PaymentMethod) -> PaymentMethod:
        pass

    @abstractmethod
    async def delete(self, payment_method_id: UUID) -> None:
        pass

    @abstractmethod
    async def clear_default(self, user_id: UserId) -> None:
        pass

    @abstractmethod
    async def set_default(self, payment_method_id: UUID) -> None:
        pass

    @abstractmethod
    async def get_most_recent(self, user_id: UserId) -> Optional[PaymentMethod]:
        pass

    @abstractmethod
    async def has_pending_transactions(self, payment_method_id: UUID) -> bool:
        pass
