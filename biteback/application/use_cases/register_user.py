"""Register user use case"""

import logging

from sqlalchemy.exc import IntegrityError

from ...core.exceptions import ConflictError
from ...core.security import get_password_hash
from ...domain.entities.notification_settings import NotificationSettings
from ...domain.entities.user import User
from ...domain.repositories.unit_of_work import IUnitOfWork
from ..dtos.auth_dtos import AuthResponse, SignupDto
from ..dtos.user_dtos import UserDto
from ..services.otp_service import OtpService, dev_only
from ..services.token_service import TokenService

logger = logging.getLogger(__name__)


class RegisterUserUseCase:

    def __init__(self, unit_of_work: IUnitOfWork, otp_service: OtpService):
        self.unit_of_work = unit_of_work
        self.otp_service = otp_service

    async def execute(self, request: SignupDto) -> AuthResponse:
        try:
            async with self.unit_of_work:
                users = self.unit_of_work.users
                if await users.exists_by_email(request.email):
                    raise ConflictError("Email already registered")
                if await users.exists_by_phone(request.phone):
                    raise ConflictError("Phone number already registered")

                user = User.create(
                    email=request.email,
                    phone=request.phone,
                    hashed_password=get_password_hash(request.password),
                    full_name=request.full_name,
                )
                await users.add(user)
                await self.unit_of_work.notification_settings.save(NotificationSettings(user_id=user.id))

                tokens = await TokenService(self.unit_of_work).issue_pair(user)
                await self.unit_of_work.commit()
        except IntegrityError:
            # Lost a race with a concurrent signup for the same email or phone
            raise ConflictError("Email or phone number already registered")

        code = await self.otp_service.send(user)
        logger.info("User registered: %s", user.id)

        return AuthResponse(
            user=UserDto.from_entity(user),
            tokens=tokens,
            dev_otp=dev_only(code),
        )
