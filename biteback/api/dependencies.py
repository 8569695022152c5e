"""API dependencies for DDD architecture"""

from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError
from sqlalchemy.orm import Session

from ..core.config import settings
from ..core.exceptions import RateLimitedError, UnauthorizedError
from ..core.security import ACCESS_TOKEN_TYPE, decode_token
from ..db.database import get_db
from ..domain.authorization import CurrentUser
from ..domain.repositories.cache_client import ICacheClient
from ..domain.repositories.unit_of_work import IUnitOfWork
from ..domain.value_objects.entity_ids import UserId
from ..application.services.otp_service import OtpService
from ..infrastructure.cache.session_cache import SessionCache
from ..infrastructure.external_services.email_service import EmailService
from ..infrastructure.external_services.payment_service import MockPaymentService
from ..infrastructure.external_services.sms_service import SmsService
from ..infrastructure.repositories.unit_of_work_impl import UnitOfWorkImpl


# Missing credentials are reported through our own error envelope
security = HTTPBearer(auto_error=False)


def get_unit_of_work(db: Session = Depends(get_db)) -> IUnitOfWork:
    """Get Unit of Work instance"""
    return UnitOfWorkImpl(db)


def get_cache_client(request: Request) -> ICacheClient:
    """Cache client created in the application lifespan"""
    return request.app.state.cache


def get_session_cache(cache: ICacheClient = Depends(get_cache_client)) -> SessionCache:
    return SessionCache(cache)


def get_email_service() -> EmailService:
    return EmailService()


def get_sms_service() -> SmsService:
    return SmsService()


def get_payment_service() -> MockPaymentService:
    return MockPaymentService()


def get_otp_service(
    session_cache: SessionCache = Depends(get_session_cache),
    sms_service: SmsService = Depends(get_sms_service),
) -> OtpService:
    return OtpService(session_cache, sms_service)


async def get_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> str:
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError("Authentication required")
    return credentials.credentials


async def get_current_user(
    token: str = Depends(get_bearer_token),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
    session_cache: SessionCache = Depends(get_session_cache),
) -> CurrentUser:
    """Inbound auth gate: blacklist, signature, type, then the user must still exist"""
    if await session_cache.is_token_blacklisted(token):
        raise UnauthorizedError("Token has been revoked")

    try:
        payload = decode_token(token, ACCESS_TOKEN_TYPE)
        user_id = UserId.from_str(payload["sub"])
    except (JWTError, ValueError):
        raise UnauthorizedError("Invalid or expired token")

    async with unit_of_work:
        user = await unit_of_work.users.get_by_id(user_id)
    if not user:
        raise UnauthorizedError("User not found")

    return CurrentUser(
        id=user.id.value,
        email=user.email,
        role=user.role,
        is_phone_verified=user.is_phone_verified,
    )


class RateLimiter:
    """Fixed-window limit per client address, counted in the cache"""

    def __init__(self, scope: str, limit_setting: str):
        self.scope = scope
        self.limit_setting = limit_setting

    async def __call__(self, request: Request, session_cache: SessionCache = Depends(get_session_cache)) -> None:
        limit = getattr(settings, self.limit_setting)
        client = request.client.host if request.client else "unknown"
        window = settings.RATE_LIMIT_WINDOW_SECONDS

        count = await session_cache.hit_rate_limit(self.scope, client, window)
        if count > limit:
            raise RateLimitedError(
                "Too many requests. Please try again later.",
                details={"limit": limit, "window_seconds": window},
            )


login_rate_limit = RateLimiter("login", "LOGIN_RATE_LIMIT")
resend_otp_rate_limit = RateLimiter("resend_otp", "RESEND_OTP_RATE_LIMIT")
forgot_password_rate_limit = RateLimiter("forgot_password", "FORGOT_PASSWORD_RATE_LIMIT")
