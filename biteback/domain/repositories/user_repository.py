"""User repository interface"""

from abc import ABC, abstractmethod
from typing import Optional

from ..entities.user import User
from ..value_objects.entity_ids import UserId


class IUserRepository(ABC):

    @abstractmethod
    async def get_by_id(self, user_id: UserId) -> Optional[User]:
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        pass

    @abstractmethod
    async def get_by_phone(self, phone: str) -> Optional[User]:
        pass

    @abstractmethod
    async def get_by_email_or_phone(self, identifier: str) -> Optional[User]:
        """Login accepts either credential in the same field"""
        pass

    @abstractmethod
    async def exists_by_email(self, email: str, exclude_id: Optional[UserId] = None) -> bool:
        pass

    @abstractmethod
    async def exists_by_phone(self, phone: str, exclude_id: Optional[UserId] = None) -> bool:
        pass

    @abstractmethod
    async def add(self, user: User) -> User:
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        pass
