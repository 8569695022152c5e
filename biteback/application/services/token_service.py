"""Access/refresh token pair issuance"""

from datetime import datetime, timedelta

from ...core.config import settings
from ...core.security import create_access_token, create_refresh_token
from ...domain.entities.user import User
from ...domain.repositories.unit_of_work import IUnitOfWork
from ..dtos.auth_dtos import TokenDto


class TokenService:
    """Mints a token pair and records the refresh token.

    Runs inside the caller's unit of work; the caller commits.
    """

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def issue_pair(self, user: User) -> TokenDto:
        subject = str(user.id)
        access_token = create_access_token(subject, user.email, user.role.value)
        refresh_token = create_refresh_token(subject, user.email, user.role.value)

        expires_at = datetime.utcnow() + timedelta(days=settings.REFRESH_TOKEN_EXPIRE_DAYS)
        await self.unit_of_work.refresh_tokens.add(user.id, refresh_token, expires_at)

        return TokenDto(
            access_token=access_token,
            refresh_token=refresh_token,
            expires_in=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        )
