"""Forgot password use case"""

import logging
from datetime import datetime, timedelta

from ...core.config import settings
from ...core.security import generate_reset_token
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...infrastructure.external_services.email_service import EmailService
from ..dtos.auth_dtos import ForgotPasswordDto, ForgotPasswordResponse
from ..services.otp_service import dev_only

logger = logging.getLogger(__name__)

GENERIC_MESSAGE = "If an account with that email exists, a password reset link has been sent."


class ForgotPasswordUseCase:
    """Use case for handling forgot password requests"""

    def __init__(self, unit_of_work: IUnitOfWork, email_service: EmailService):
        self.unit_of_work = unit_of_work
        self.email_service = email_service

    async def execute(self, request: ForgotPasswordDto) -> ForgotPasswordResponse:
        async with self.unit_of_work:
            user = await self.unit_of_work.users.get_by_email(request.email)

            if not user:
                # Don't reveal whether the email exists
                return ForgotPasswordResponse(message=GENERIC_MESSAGE)

            # Only the newest reset link stays usable
            await self.unit_of_work.reset_tokens.invalidate_unused_for_user(user.id)

            reset_token = generate_reset_token()
            expires_at = datetime.utcnow() + timedelta(minutes=settings.PASSWORD_RESET_EXPIRATION_MINUTES)
            await self.unit_of_work.reset_tokens.add(user.id, reset_token, expires_at)
            await self.unit_of_work.commit()

        sent = await self.email_service.send_password_reset_email(
            to_email=user.email,
            full_name=user.full_name,
            reset_token=reset_token,
        )
        if not sent:
            # Token is stored; the user can ask again
            logger.warning("Password reset email to user %s was not delivered", user.id)

        return ForgotPasswordResponse(message=GENERIC_MESSAGE, reset_token=dev_only(reset_token))
