"""Refresh token rotation use case"""

from jose import JWTError

from ...core.exceptions import UnauthorizedError
from ...core.security import REFRESH_TOKEN_TYPE, decode_token
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...domain.value_objects.entity_ids import UserId
from ..dtos.auth_dtos import RefreshTokenDto, TokenDto
from ..services.token_service import TokenService

INVALID_REFRESH_TOKEN = "Invalid or expired refresh token"


class RefreshTokenUseCase:
    """Each refresh token works once: it is revoked and linked to its replacement."""

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, request: RefreshTokenDto) -> TokenDto:
        try:
            payload = decode_token(request.refresh_token, REFRESH_TOKEN_TYPE)
            user_id = UserId.from_str(payload["sub"])
        except (JWTError, ValueError):
            raise UnauthorizedError(INVALID_REFRESH_TOKEN)

        async with self.unit_of_work:
            stored = await self.unit_of_work.refresh_tokens.get_active(request.refresh_token, user_id)
            if not stored:
                raise UnauthorizedError(INVALID_REFRESH_TOKEN)

            user = await self.unit_of_work.users.get_by_id(user_id)
            if not user:
                raise UnauthorizedError(INVALID_REFRESH_TOKEN)

            tokens = await TokenService(self.unit_of_work).issue_pair(user)
            await self.unit_of_work.refresh_tokens.revoke(stored.id, replaced_by=tokens.refresh_token)
            await self.unit_of_work.commit()

        return tokens
