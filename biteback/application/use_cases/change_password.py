"""Change password use case"""

import logging
from uuid import UUID

from ...core.exceptions import BadRequestError, NotFoundError
from ...core.security import get_password_hash, verify_password
from ...domain.value_objects.entity_ids import UserId
from ...domain.repositories.unit_of_work import IUnitOfWork
from ..dtos.common import MessageResponse
from ..dtos.user_dtos import ChangePasswordDto

logger = logging.getLogger(__name__)


class ChangePasswordUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, user_id: UUID, request: ChangePasswordDto) -> MessageResponse:
        async with self.unit_of_work:
            user = await self.unit_of_work.users.get_by_id(UserId(user_id))
            if not user:
                raise NotFoundError("User not found")

            if not verify_password(request.current_password, user.hashed_password):
                raise BadRequestError("Current password is incorrect")

            user.change_password(get_password_hash(request.new_password))
            await self.unit_of_work.users.update(user)
            await self.unit_of_work.commit()

            for event in user.get_events():
                logger.info("User event: %s", event)

        return MessageResponse(message="Password changed successfully")
