"""SMS delivery for one-time passwords"""

import logging

from ...core.config import settings

logger = logging.getLogger(__name__)


class SmsService:
    """No SMS provider is wired in; codes are written to the log outside production."""

    async def send_otp(self, phone: str, code: str) -> None:
        if settings.is_production:
            logger.info("OTP dispatched to %s", _mask(phone))
        else:
            logger.info("OTP for %s: %s", phone, code)


def _mask(phone: str) -> str:
    return f"{phone[:4]}{'*' * max(len(phone) - 6, 0)}{phone[-2:]}"
