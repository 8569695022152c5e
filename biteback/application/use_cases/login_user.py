"""Login user use case"""

import logging

from ...core.exceptions import UnauthorizedError
from ...core.security import verify_password
from ...domain.repositories.unit_of_work import IUnitOfWork
from ..dtos.auth_dtos import AuthResponse, LoginDto
from ..dtos.user_dtos import UserDto
from ..services.token_service import TokenService

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


class LoginUserUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, request: LoginDto) -> AuthResponse:
        async with self.unit_of_work:
            user = await self.unit_of_work.users.get_by_email_or_phone(request.email_or_phone)

            # Same error for unknown account and wrong password
            if not user or not verify_password(request.password, user.hashed_password):
                raise UnauthorizedError(INVALID_CREDENTIALS)

            tokens = await TokenService(self.unit_of_work).issue_pair(user)
            await self.unit_of_work.commit()

        logger.info("User logged in: %s", user.id)
        return AuthResponse(user=UserDto.from_entity(user), tokens=tokens)
