"""User domain events"""

from dataclasses import dataclass
from datetime import datetime

from ..value_objects.entity_ids import UserId


@dataclass(frozen=True)
class UserPhoneVerified:
    user_id: UserId
    phone: str
    verified_at: datetime


@dataclass(frozen=True)
class UserPasswordChanged:
    user_id: UserId
    changed_at: datetime
