"""Key-value cache interface used for OTPs, blacklists and counters"""

from abc import ABC, abstractmethod
from typing import Optional


class ICacheClient(ABC):

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        pass

    @abstractmethod
    async def set(self, key: str, value: str, ttl_seconds: Optional[int] = None) -> None:
        pass

    @abstractmethod
    async def delete(self, key: str) -> None:
        pass

    @abstractmethod
    async def exists(self, key: str) -> bool:
        pass

    @abstractmethod
    async def incr(self, key: str) -> int:
        pass

    @abstractmethod
    async def expire(self, key: str, ttl_seconds: int) -> None:
        pass

    @abstractmethod
    async def ttl(self, key: str) -> int:
        """Remaining seconds; negative when the key is missing or has no expiry"""
        pass
