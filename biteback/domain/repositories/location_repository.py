"""Saved location repository interface"""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from ..entities.location import Location
from ..value_objects.entity_ids import UserId


class ILocationRepository(ABC):

    @abstractmethod
    async def list_for_user(self, user_id: UserId) -> List[Location]:
        pass

    @abstractmethod
    async def get_for_user(self, location_id: UUID, user_id: UserId) -> Optional[Location]:
        pass

    @abstractmethod
    async def count_for_user(self, user_id: UserId) -> int:
        pass

    @abstractmethod
    async def add(self, location: Location) -> Location:
        pass

    @abstractmethod
    async def update(self, location: Location) -> Location:
        pass

    @abstractmethod
    async def delete(self, location_id: UUID) -> None:
        pass

    @abstractmethod
    async def clear_default(self, user_id: UserId) -> None:
        pass

    @abstractmethod
    async def get_most_recent(self, user_id: UserId) -> Optional[Location]:
        pass
