"""Saved payment method DTOs"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from ...domain.entities.payment_method import PaymentMethod
from ...domain.enums import PaymentMethodType


class AddPaymentMethodDto(BaseModel):
    """Raw card details; only the token, last four digits and brand are stored"""
    type: PaymentMethodType = PaymentMethodType.CREDIT_CARD
    card_number: str = Field(pattern=r"^\d{13,19}$")
    expiry_month: int = Field(ge=1, le=12)
    expiry_year: int = Field(ge=2024, le=2040)
    cvv: str = Field(pattern=r"^\d{3,4}$")
    is_default: bool = False


class PaymentMethodDto(BaseModel):
    id: UUID
    type: PaymentMethodType
    last_four_digits: str
    card_brand: str
    expiry_month: int
    expiry_year: int
    is_default: bool
    created_at: datetime

    @classmethod
    def from_entity(cls, method: PaymentMethod) -> 'PaymentMethodDto':
        return cls(
            id=method.id,
            type=method.type,
            last_four_digits=method.last_four_digits,
            card_brand=method.card_brand,
            expiry_month=method.expiry_month,
            expiry_year=method.expiry_year,
            is_default=method.is_default,
            created_at=method.created_at,
        )
