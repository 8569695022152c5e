"""Reset password use case"""

import logging

from ...core.exceptions import BadRequestError
from ...core.security import get_password_hash
from ...domain.repositories.unit_of_work import IUnitOfWork
from ..dtos.auth_dtos import ResetPasswordDto
from ..dtos.common import MessageResponse

logger = logging.getLogger(__name__)

INVALID_TOKEN = "Invalid or expired reset token"


class ResetPasswordUseCase:
    """Consumes a reset token, replaces the password and ends every session
    in a single transaction."""

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, request: ResetPasswordDto) -> MessageResponse:
        async with self.unit_of_work:
            stored = await self.unit_of_work.reset_tokens.get_valid(request.token)
            if not stored:
                raise BadRequestError(INVALID_TOKEN)

            user = await self.unit_of_work.users.get_by_id(stored.user_id)
            if not user:
                raise BadRequestError(INVALID_TOKEN)

            user.change_password(get_password_hash(request.new_password))
            await self.unit_of_work.users.update(user)
            await self.unit_of_work.reset_tokens.mark_used(stored.id)
            revoked = await self.unit_of_work.refresh_tokens.revoke_all_for_user(user.id)
            await self.unit_of_work.commit()

        logger.info("Password reset for user %s, %d sessions revoked", user.id, revoked)
        return MessageResponse(message="Password has been reset successfully")
