"""Authentication DTOs for API layer"""

from typing import Optional

from pydantic import BaseModel, EmailStr, Field, field_validator

from .user_dtos import UserDto
from .validators import PHONE_PATTERN, validate_otp, validate_password


class SignupDto(BaseModel):
    """DTO for user registration"""
    email: EmailStr
    phone: str = Field(pattern=PHONE_PATTERN, description="E.164, e.g. +201234567890")
    password: str
    full_name: str = Field(min_length=2, max_length=100)

    @field_validator("password")
    @classmethod
    def check_password(cls, value: str) -> str:
        return validate_password(value)


class LoginDto(BaseModel):
    """DTO for login with either email or phone"""
    email_or_phone: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=1)


class VerifyPhoneDto(BaseModel):
    code: str

    @field_validator("code")
    @classmethod
    def check_code(cls, value: str) -> str:
        return validate_otp(value)


class ResendOtpDto(BaseModel):
    email_or_phone: str = Field(min_length=1, max_length=255)


class ForgotPasswordDto(BaseModel):
    email: EmailStr


class ResetPasswordDto(BaseModel):
    token: str = Field(min_length=1)
    new_password: str

    @field_validator("new_password")
    @classmethod
    def check_new_password(cls, value: str) -> str:
        return validate_password(value)


class RefreshTokenDto(BaseModel):
    refresh_token: str = Field(min_length=1)


class TokenDto(BaseModel):
    """DTO for authentication tokens"""
    access_token: str
    refresh_token: str
    token_type: str = "bearer"
    expires_in: int


class AuthResponse(BaseModel):
    user: UserDto
    tokens: TokenDto
    dev_otp: Optional[str] = None


class OtpSentResponse(BaseModel):
    message: str
    dev_otp: Optional[str] = None


class ForgotPasswordResponse(BaseModel):
    message: str
    reset_token: Optional[str] = None
