"""Phone OTP issuance"""

import logging
from typing import Optional

from ...core.config import settings
from ...core.security import generate_otp
from ...domain.entities.user import User
from ...infrastructure.cache.session_cache import SessionCache
from ...infrastructure.external_services.sms_service import SmsService

logger = logging.getLogger(__name__)


class OtpService:

    def __init__(self, session_cache: SessionCache, sms_service: SmsService):
        self.session_cache = session_cache
        self.sms_service = sms_service

    async def send(self, user: User) -> str:
        """Replace the user's OTP, restart the resend cooldown and text the code.

        A fresh code also clears the failed-attempt counter.
        """
        key = str(user.id)
        code = generate_otp(settings.OTP_LENGTH)
        await self.session_cache.store_otp(key, code)
        await self.session_cache.reset_otp_attempts(key)
        await self.session_cache.start_otp_cooldown(key)
        await self.sms_service.send_otp(user.phone, code)
        logger.info("OTP issued for user %s", key)
        return code


def dev_only(value: str) -> Optional[str]:
    """Echo secrets back to the client only outside production"""
    return None if settings.is_production else value
