"""Security utilities"""

import secrets
import string
import uuid
from datetime import datetime, timedelta
from typing import Any, Dict

from jose import jwt, JWTError
from passlib.context import CryptContext

from .config import settings


ACCESS_TOKEN_TYPE = "access"
REFRESH_TOKEN_TYPE = "refresh"


# Password context
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)


def get_password_hash(password: str) -> str:
    """Hash password"""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify password"""
    return pwd_context.verify(plain_password, hashed_password)


def _secret_for(token_type: str) -> str:
    if token_type == ACCESS_TOKEN_TYPE:
        return settings.JWT_ACCESS_SECRET
    if token_type == REFRESH_TOKEN_TYPE:
        return settings.JWT_REFRESH_SECRET
    raise ValueError(f"Unknown token type: {token_type}")


def _encode(subject: str, email: str, role: str, token_type: str, expires_delta: timedelta) -> str:
    now = datetime.utcnow()
    to_encode = {
        "sub": subject,
        "email": email,
        "role": role,
        "type": token_type,
        # Two tokens minted in the same second must still differ
        "jti": uuid.uuid4().hex,
        "iat": now,
        "exp": now + expires_delta,
    }
    return jwt.encode(to_encode, _secret_for(token_type), algorithm=settings.JWT_ALGORITHM)


def create_access_token(subject: str, email: str, role: str) -> str:
    """Create access token"""
    expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    return _encode(subject, email, role, ACCESS_TOKEN_TYPE, expires_delta)


def create_refresh_token(subject: str, email: str, role: str) -> str:
    """Create refresh token"""
    expires_delta = timedelta(days=settings.REFRESH_TOKEN_EXPIRE_DAYS)
    return _encode(subject, email, role, REFRESH_TOKEN_TYPE, expires_delta)


def decode_token(token: str, token_type: str) -> Dict[str, Any]:
    """Verify signature and expiry, and check the encoded type.

    Raises JWTError for anything that is not a valid token of ``token_type``.
    """
    payload = jwt.decode(token, _secret_for(token_type), algorithms=[settings.JWT_ALGORITHM])
    if payload.get("type") != token_type:
        raise JWTError("Invalid token type")
    if not payload.get("sub"):
        raise JWTError("Token has no subject")
    return payload


def get_unverified_claims(token: str) -> Dict[str, Any]:
    """Read claims without verifying the signature (used for expiry on logout)."""
    try:
        return jwt.get_unverified_claims(token)
    except JWTError:
        return {}


def generate_otp(length: int = 6) -> str:
    """Generate a numeric one-time code."""
    return "".join(secrets.choice(string.digits) for _ in range(length))


def generate_reset_token() -> str:
    """Generate a secure password reset token."""
    alphabet = string.ascii_letters + string.digits
    return ''.join(secrets.choice(alphabet) for _ in range(48))
