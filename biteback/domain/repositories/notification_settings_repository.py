"""Notification settings repository interface"""

from abc import ABC, abstractmethod
from typing import Optional

from ..entities.notification_settings import NotificationSettings
from ..value_objects.entity_ids import UserId


class INotificationSettingsRepository(ABC):

    @abstractmethod
    async def get_for_user(self, user_id: UserId) -> Optional[NotificationSettings]:
        pass

    @abstractmethod
    async def save(self, settings: NotificationSettings) -> NotificationSettings:
        """Insert or update the single row for the user"""
        pass
