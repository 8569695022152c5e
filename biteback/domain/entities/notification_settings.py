"""Notification preferences entity"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..value_objects.entity_ids import UserId


@dataclass
class NotificationSettings:
    user_id: UserId
    push_notifications: bool = True
    sms_notifications: bool = True
    promotional_emails: bool = False
    order_updates: bool = True
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def apply(
        self,
        push_notifications: Optional[bool] = None,
        sms_notifications: Optional[bool] = None,
        promotional_emails: Optional[bool] = None,
        order_updates: Optional[bool] = None,
    ) -> None:
        if push_notifications is not None:
            self.push_notifications = push_notifications
        if sms_notifications is not None:
            self.sms_notifications = sms_notifications
        if promotional_emails is not None:
            self.promotional_emails = promotional_emails
        if order_updates is not None:
            self.order_updates = order_updates
        self.updated_at = datetime.utcnow()
