"""Saved payment method entity"""

import re
import secrets
from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4

from ..enums import PaymentMethodType
from ..value_objects.entity_ids import UserId


@dataclass
class PaymentMethod:
    user_id: UserId
    type: PaymentMethodType
    card_token: str
    last_four_digits: str
    card_brand: str
    expiry_month: int
    expiry_year: int
    is_default: bool = False
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.utcnow)

    @classmethod
    def from_card(
        cls,
        user_id: UserId,
        method_type: PaymentMethodType,
        card_number: str,
        expiry_month: int,
        expiry_year: int,
        is_default: bool = False,
    ) -> 'PaymentMethod':
        """Tokenize a card. Only the last four digits and brand are kept."""
        digits = re.sub(r"\s", "", card_number)
        return cls(
            user_id=user_id,
            type=method_type,
            card_token=mock_card_token(),
            last_four_digits=digits[-4:],
            card_brand=detect_card_brand(digits),
            expiry_month=expiry_month,
            expiry_year=expiry_year,
            is_default=is_default,
        )


def mock_card_token() -> str:
    # Stands in for a gateway-issued token
    return f"tok_{int(datetime.utcnow().timestamp() * 1000)}_{secrets.token_hex(5)}"


def detect_card_brand(card_number: str) -> str:
    number = re.sub(r"\s", "", card_number)
    if re.match(r"^4", number):
        return "Visa"
    if re.match(r"^5[1-5]", number):
        return "Mastercard"
    if re.match(r"^3[47]", number):
        return "Amex"
    if re.match(r"^6(?:011|5)", number):
        return "Discover"
    return "Unknown"
