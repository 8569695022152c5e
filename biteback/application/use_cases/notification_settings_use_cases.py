"""Notification settings use cases"""

from uuid import UUID

from ...domain.entities.notification_settings import NotificationSettings
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...domain.value_objects.entity_ids import UserId
from ..dtos.settings_dtos import NotificationSettingsDto, UpdateNotificationSettingsDto


class GetNotificationSettingsUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, user_id: UUID) -> NotificationSettingsDto:
        owner = UserId(user_id)
        async with self.unit_of_work:
            current = await self.unit_of_work.notification_settings.get_for_user(owner)
            if current is None:
                current = NotificationSettings(user_id=owner)
                await self.unit_of_work.notification_settings.save(current)
                await self.unit_of_work.commit()
        return NotificationSettingsDto.from_entity(current)


class UpdateNotificationSettingsUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, user_id: UUID, request: UpdateNotificationSettingsDto) -> NotificationSettingsDto:
        owner = UserId(user_id)
        async with self.unit_of_work:
            current = await self.unit_of_work.notification_settings.get_for_user(owner)
            if current is None:
                current = NotificationSettings(user_id=owner)

            current.apply(**request.model_dump(exclude_unset=True))
            await self.unit_of_work.notification_settings.save(current)
            await self.unit_of_work.commit()

        return NotificationSettingsDto.from_entity(current)
