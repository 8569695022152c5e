"""Key layout for the ephemeral session state kept in the cache.

    otp:{user_id}                 current OTP code
    otp_attempts:{user_id}        failed verification counter
    otp_cooldown:{user_id}        present while resend is blocked
    blacklist:{access_token}      revoked access tokens
    rate_limit:{scope}:{client}   fixed-window request counters
"""

from typing import Optional

from ...core.config import settings
from ...domain.repositories.cache_client import ICacheClient


class SessionCache:

    def __init__(self, cache: ICacheClient):
        self.cache = cache

    # OTP

    async def store_otp(self, user_id: str, code: str) -> None:
        await self.cache.set(f"otp:{user_id}", code, settings.OTP_EXPIRATION_MINUTES * 60)

    async def get_otp(self, user_id: str) -> Optional[str]:
        return await self.cache.get(f"otp:{user_id}")

    async def delete_otp(self, user_id: str) -> None:
        await self.cache.delete(f"otp:{user_id}")

    async def get_otp_attempts(self, user_id: str) -> int:
        value = await self.cache.get(f"otp_attempts:{user_id}")
        return int(value) if value else 0

    async def increment_otp_attempts(self, user_id: str) -> int:
        key = f"otp_attempts:{user_id}"
        attempts = await self.cache.incr(key)
        await self.cache.expire(key, settings.OTP_ATTEMPTS_TTL_SECONDS)
        return attempts

    async def reset_otp_attempts(self, user_id: str) -> None:
        await self.cache.delete(f"otp_attempts:{user_id}")

    async def start_otp_cooldown(self, user_id: str) -> None:
        await self.cache.set(f"otp_cooldown:{user_id}", "1", settings.OTP_RESEND_COOLDOWN_SECONDS)

    async def otp_cooldown_remaining(self, user_id: str) -> int:
        """Seconds left before another OTP may be sent, 0 when allowed"""
        remaining = await self.cache.ttl(f"otp_cooldown:{user_id}")
        return max(remaining, 0)

    # Access token blacklist

    async def blacklist_token(self, token: str, ttl_seconds: int) -> None:
        if ttl_seconds > 0:
            await self.cache.set(f"blacklist:{token}", "1", ttl_seconds)

    async def is_token_blacklisted(self, token: str) -> bool:
        return await self.cache.exists(f"blacklist:{token}")

    # Rate limiting

    async def hit_rate_limit(self, scope: str, client: str, window_seconds: int) -> int:
        """Count a request in the current window and return the running total"""
        key = f"rate_limit:{scope}:{client}"
        count = await self.cache.incr(key)
        # Re-arm the window when the key has no expiry
        if count == 1 or await self.cache.ttl(key) < 0:
            await self.cache.expire(key, window_seconds)
        return count
