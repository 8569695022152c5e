"""Update user profile use case"""

from uuid import UUID

from ...core.exceptions import ConflictError, NotFoundError
from ...domain.value_objects.entity_ids import UserId
from ...domain.repositories.unit_of_work import IUnitOfWork
from ..dtos.user_dtos import UpdateProfileDto, UserDto


class UpdateUserProfileUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, user_id: UUID, request: UpdateProfileDto) -> UserDto:
        async with self.unit_of_work:
            users = self.unit_of_work.users
            user = await users.get_by_id(UserId(user_id))
            if not user:
                raise NotFoundError("User not found")

            if request.email and await users.exists_by_email(request.email, exclude_id=user.id):
                raise ConflictError("Email already in use")
            if request.phone and await users.exists_by_phone(request.phone, exclude_id=user.id):
                raise ConflictError("Phone number already in use")

            user.update_profile(
                full_name=request.full_name,
                email=request.email,
                phone=request.phone,
                avatar_url=request.avatar_url,
            )
            await users.update(user)
            await self.unit_of_work.commit()

            return UserDto.from_entity(user)
