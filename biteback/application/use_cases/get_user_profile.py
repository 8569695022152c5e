"""Get user profile use case"""

from uuid import UUID

from ...core.exceptions import NotFoundError
from ...domain.value_objects.entity_ids import UserId
from ...domain.repositories.unit_of_work import IUnitOfWork
from ..dtos.user_dtos import UserDto


class GetUserProfileUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, user_id: UUID) -> UserDto:
        async with self.unit_of_work:
            user = await self.unit_of_work.users.get_by_id(UserId(user_id))
            if not user:
                raise NotFoundError("User not found")
            return UserDto.from_entity(user)
