"""Refresh and password-reset token repository interfaces"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID

from ..value_objects.entity_ids import UserId


@dataclass(frozen=True)
class StoredRefreshToken:
    id: UUID
    user_id: UserId
    token: str
    expires_at: datetime
    revoked_at: Optional[datetime] = None


@dataclass(frozen=True)
class StoredResetToken:
    id: UUID
    user_id: UserId
    token: str
    expires_at: datetime
    used_at: Optional[datetime] = None


class IRefreshTokenRepository(ABC):

    @abstractmethod
    async def add(self, user_id: UserId, token: str, expires_at: datetime) -> StoredRefreshToken:
        pass

    @abstractmethod
    async def get_active(self, token: str, user_id: UserId) -> Optional[StoredRefreshToken]:
        """Unrevoked and unexpired row for this exact token and user"""
        pass

    @abstractmethod
    async def revoke(self, token_id: UUID, replaced_by: Optional[str] = None) -> None:
        pass

    @abstractmethod
    async def revoke_all_for_user(self, user_id: UserId) -> int:
        pass


class IPasswordResetTokenRepository(ABC):

    @abstractmethod
    async def add(self, user_id: UserId, token: str, expires_at: datetime) -> StoredResetToken:
        pass

    @abstractmethod
    async def get_valid(self, token: str) -> Optional[StoredResetToken]:
        """Unused and unexpired token"""
        pass

    @abstractmethod
    async def mark_used(self, token_id: UUID) -> None:
        pass

    @abstractmethod
    async def invalidate_unused_for_user(self, user_id: UserId) -> int:
        pass
