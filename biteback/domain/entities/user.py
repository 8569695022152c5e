"""User entity with business logic"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, List

from ..value_objects.entity_ids import UserId
from ..enums import UserRole
from ..events.user_events import UserPhoneVerified, UserPasswordChanged


@dataclass
class User:
    id: UserId
    email: str
    phone: str
    hashed_password: str
    full_name: str
    role: UserRole = UserRole.USER
    avatar_url: Optional[str] = None
    is_phone_verified: bool = False
    is_email_verified: bool = False

    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    # Domain events
    _events: List = field(default_factory=list, init=False)

    @classmethod
    def create(
        cls,
        email: str,
        phone: str,
        hashed_password: str,
        full_name: str,
    ) -> 'User':
        """Factory method to create a new user with proper defaults"""
        now = datetime.utcnow()
        return cls(
            id=UserId.generate(),
            email=normalize_email(email),
            phone=phone.strip(),
            hashed_password=hashed_password,
            full_name=full_name.strip(),
            role=UserRole.USER,
            created_at=now,
            updated_at=now,
        )

    def verify_phone(self) -> None:
        """Business logic: mark the phone number as verified"""
        self.is_phone_verified = True
        self.updated_at = datetime.utcnow()

        self._events.append(UserPhoneVerified(
            user_id=self.id,
            phone=self.phone,
            verified_at=self.updated_at
        ))

    def change_password(self, hashed_password: str) -> None:
        """Business logic: replace the password hash"""
        self.hashed_password = hashed_password
        self.updated_at = datetime.utcnow()

        self._events.append(UserPasswordChanged(
            user_id=self.id,
            changed_at=self.updated_at
        ))

    def update_profile(
        self,
        full_name: Optional[str] = None,
        email: Optional[str] = None,
        phone: Optional[str] = None,
        avatar_url: Optional[str] = None,
    ) -> None:
        """Business logic: profile edits reset the matching verification flag"""
        if full_name:
            self.full_name = full_name.strip()
        if email and normalize_email(email) != self.email:
            self.email = normalize_email(email)
            self.is_email_verified = False
        if phone and phone.strip() != self.phone:
            self.phone = phone.strip()
            self.is_phone_verified = False
        if avatar_url is not None:
            self.avatar_url = avatar_url
        self.updated_at = datetime.utcnow()

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    def get_events(self) -> List:
        """Get and clear domain events"""
        events = self._events.copy()
        self._events.clear()
        return events


def normalize_email(email: str) -> str:
    return email.strip().lower()
