"""Phone verification use case"""

import logging
from uuid import UUID

from ...core.config import settings
from ...core.exceptions import BadRequestError, NotFoundError
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...domain.value_objects.entity_ids import UserId
from ...infrastructure.cache.session_cache import SessionCache
from ..dtos.auth_dtos import VerifyPhoneDto
from ..dtos.common import MessageResponse

logger = logging.getLogger(__name__)


class VerifyPhoneUseCase:

    def __init__(self, unit_of_work: IUnitOfWork, session_cache: SessionCache):
        self.unit_of_work = unit_of_work
        self.session_cache = session_cache

    async def execute(self, user_id: UUID, request: VerifyPhoneDto) -> MessageResponse:
        key = str(user_id)

        # Checked before the code so a locked-out user cannot keep guessing
        attempts = await self.session_cache.get_otp_attempts(key)
        if attempts >= settings.OTP_MAX_ATTEMPTS:
            raise BadRequestError("Too many failed attempts. Please request a new OTP")

        stored_code = await self.session_cache.get_otp(key)
        if not stored_code:
            raise BadRequestError("OTP expired or not found. Please request a new one")

        if stored_code != request.code:
            attempts = await self.session_cache.increment_otp_attempts(key)
            logger.info("Invalid OTP for user %s (attempt %d)", key, attempts)
            raise BadRequestError(
                "Invalid OTP",
                details={"remaining_attempts": max(settings.OTP_MAX_ATTEMPTS - attempts, 0)},
            )

        async with self.unit_of_work:
            user = await self.unit_of_work.users.get_by_id(UserId(user_id))
            if not user:
                raise NotFoundError("User not found")
            user.verify_phone()
            await self.unit_of_work.users.update(user)
            await self.unit_of_work.commit()

            for event in user.get_events():
                logger.info("User event: %s", event)

        await self.session_cache.delete_otp(key)
        await self.session_cache.reset_otp_attempts(key)
        logger.info("Phone verified for user %s", key)
        return MessageResponse(message="Phone number verified successfully")
