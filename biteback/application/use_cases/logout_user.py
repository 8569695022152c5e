"""Logout use case"""

import logging
import time
from uuid import UUID

from ...core.security import get_unverified_claims
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...domain.value_objects.entity_ids import UserId
from ...infrastructure.cache.session_cache import SessionCache
from ..dtos.common import MessageResponse

logger = logging.getLogger(__name__)


class LogoutUserUseCase:

    def __init__(self, unit_of_work: IUnitOfWork, session_cache: SessionCache):
        self.unit_of_work = unit_of_work
        self.session_cache = session_cache

    async def execute(self, user_id: UUID, access_token: str) -> MessageResponse:
        async with self.unit_of_work:
            revoked = await self.unit_of_work.refresh_tokens.revoke_all_for_user(UserId(user_id))
            await self.unit_of_work.commit()

        # Blacklist the access token only for what is left of its lifetime
        expires_at = get_unverified_claims(access_token).get("exp")
        if expires_at:
            remaining = int(expires_at - time.time())
            await self.session_cache.blacklist_token(access_token, remaining)

        logger.info("User %s logged out, %d refresh tokens revoked", user_id, revoked)
        return MessageResponse(message="Logged out successfully")
