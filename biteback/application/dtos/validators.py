"""Field rules reused across request DTOs"""

import re

from ...core.config import settings

PHONE_PATTERN = r"^\+[1-9]\d{1,14}$"

_PASSWORD_RE = re.compile(r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[@$!%*?&])[A-Za-z\d@$!%*?&]{8,50}$")


def validate_password(value: str) -> str:
    if not _PASSWORD_RE.match(value):
        raise ValueError(
            "Password must be 8-50 characters and contain an uppercase letter, "
            "a lowercase letter, a number and a special character (@$!%*?&)"
        )
    return value


def validate_otp(value: str) -> str:
    # Read at call time so OTP_LENGTH overrides apply
    if len(value) != settings.OTP_LENGTH or not value.isdigit():
        raise ValueError(f"OTP must be {settings.OTP_LENGTH} digits")
    return value
