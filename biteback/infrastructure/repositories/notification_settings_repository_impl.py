"""Notification settings repository implementation"""

from typing import Optional

from sqlalchemy.orm import Session

from ...domain.entities.notification_settings import NotificationSettings
from ...domain.repositories.notification_settings_repository import INotificationSettingsRepository
from ...domain.value_objects.entity_ids import UserId
from ..orm.notification_settings_model import NotificationSettingsModel


class NotificationSettingsRepositoryImpl(INotificationSettingsRepository):

    def __init__(self, session: Session):
        self.session = session

    async def get_for_user(self, user_id: UserId) -> Optional[NotificationSettings]:
        model = self._get_model(user_id)
        return self._map_to_entity(model) if model else None

    async def save(self, settings: NotificationSettings) -> NotificationSettings:
        model = self._get_model(settings.user_id)
        if model is None:
            model = NotificationSettingsModel(user_id=settings.user_id.value)
            self.session.add(model)
        model.push_notifications = settings.push_notifications
        model.sms_notifications = settings.sms_notifications
        model.promotional_emails = settings.promotional_emails
        model.order_updates = settings.order_updates
        model.updated_at = settings.updated_at
        self.session.flush()
        return settings

    def _get_model(self, user_id: UserId) -> Optional[NotificationSettingsModel]:
        return self.session.query(NotificationSettingsModel).filter(
            NotificationSettingsModel.user_id == user_id.value
        ).first()

    def _map_to_entity(self, model: NotificationSettingsModel) -> NotificationSettings:
        return NotificationSettings(
            user_id=UserId(model.user_id),
            push_notifications=model.push_notifications,
            sms_notifications=model.sms_notifications,
            promotional_emails=model.promotional_emails,
            order_updates=model.order_updates,
            updated_at=model.updated_at,
        )
