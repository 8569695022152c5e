"""User DTOs for API layer"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field, field_validator

from ...domain.entities.user import User
from ...domain.enums import UserRole
from .validators import PHONE_PATTERN, validate_password


class UserDto(BaseModel):
    """DTO for user response"""
    id: UUID
    email: str
    phone: str
    full_name: str
    avatar_url: Optional[str] = None
    role: UserRole
    is_phone_verified: bool
    is_email_verified: bool
    created_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> 'UserDto':
        return cls(
            id=user.id.value,
            email=user.email,
            phone=user.phone,
            full_name=user.full_name,
            avatar_url=user.avatar_url,
            role=user.role,
            is_phone_verified=user.is_phone_verified,
            is_email_verified=user.is_email_verified,
            created_at=user.created_at,
        )


class UpdateProfileDto(BaseModel):
    """Partial profile update; omitted fields are left unchanged"""
    full_name: Optional[str] = Field(default=None, min_length=2, max_length=100)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(default=None, pattern=PHONE_PATTERN)
    avatar_url: Optional[str] = Field(default=None, max_length=500)


class ChangePasswordDto(BaseModel):
    current_password: str = Field(min_length=1)
    new_password: str

    @field_validator("new_password")
    @classmethod
    def check_new_password(cls, value: str) -> str:
        return validate_password(value)
