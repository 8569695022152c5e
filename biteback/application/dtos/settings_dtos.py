"""Notification settings DTOs"""

from typing import Optional

from pydantic import BaseModel

from ...domain.entities.notification_settings import NotificationSettings


class NotificationSettingsDto(BaseModel):
    push_notifications: bool
    sms_notifications: bool
    promotional_emails: bool
    order_updates: bool

    @classmethod
    def from_entity(cls, settings: NotificationSettings) -> 'NotificationSettingsDto':
        return cls(
            push_notifications=settings.push_notifications,
            sms_notifications=settings.sms_notifications,
            promotional_emails=settings.promotional_emails,
            order_updates=settings.order_updates,
        )


class UpdateNotificationSettingsDto(BaseModel):
    push_notifications: Optional[bool] = None
    sms_notifications: Optional[bool] = None
    promotional_emails: Optional[bool] = None
    order_updates: Optional[bool] = None
