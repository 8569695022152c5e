"""Mock card payment gateway"""

import logging
import secrets
import string
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ...domain.enums import PaymentStatus
from ...domain.value_objects.money import Money

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChargeResult:
    status: PaymentStatus
    transaction_ref: str
    processed_at: datetime
    error_message: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.status == PaymentStatus.PAID


class MockPaymentService:
    """Charges always succeed. Swap for a real gateway client behind the same
    ``charge`` signature."""

    provider_name = "mock"

    async def charge(self, card_token: str, amount: Money, reference: str) -> ChargeResult:
        now = datetime.utcnow()
        transaction_ref = f"TXN-{int(now.timestamp() * 1000)}-{_random_suffix(9)}"
        logger.info(
            "Mock charge %s for %s (order %s, card %s)",
            transaction_ref, amount, reference, card_token[:8],
        )
        return ChargeResult(
            status=PaymentStatus.PAID,
            transaction_ref=transaction_ref,
            processed_at=now,
        )


def _random_suffix(length: int) -> str:
    alphabet = string.ascii_uppercase + string.digits
    return "".join(secrets.choice(alphabet) for _ in range(length))
