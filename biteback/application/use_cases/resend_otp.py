"""Resend OTP use case"""

from ...core.exceptions import BadRequestError, NotFoundError
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...infrastructure.cache.session_cache import SessionCache
from ..dtos.auth_dtos import OtpSentResponse, ResendOtpDto
from ..services.otp_service import OtpService, dev_only


class ResendOtpUseCase:

    def __init__(self, unit_of_work: IUnitOfWork, session_cache: SessionCache, otp_service: OtpService):
        self.unit_of_work = unit_of_work
        self.session_cache = session_cache
        self.otp_service = otp_service

    async def execute(self, request: ResendOtpDto) -> OtpSentResponse:
        async with self.unit_of_work:
            user = await self.unit_of_work.users.get_by_email_or_phone(request.email_or_phone)
        if not user:
            raise NotFoundError("User not found")

        remaining = await self.session_cache.otp_cooldown_remaining(str(user.id))
        if remaining > 0:
            raise BadRequestError(
                f"Please wait {remaining} seconds before requesting a new OTP",
                details={"retry_after": remaining},
            )

        code = await self.otp_service.send(user)
        return OtpSentResponse(message="OTP sent successfully", dev_otp=dev_only(code))
