"""Checkout use case: turns the user's cart into a paid order"""

import logging
import secrets
import string
from datetime import datetime
from typing import Optional
from uuid import UUID

from ...core.config import settings
from ...core.exceptions import AppError, BadRequestError, NotFoundError
from ...domain.entities.order import Order, OrderPricing, PaymentTransaction
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...domain.value_objects.entity_ids import UserId
from ...infrastructure.external_services.payment_service import MockPaymentService
from ..dtos.order_dtos import CheckoutDto, OrderDto

logger = logging.getLogger(__name__)

_SUFFIX_ALPHABET = string.ascii_uppercase + string.digits


def generate_order_number(now: Optional[datetime] = None) -> str:
    """ORD-<yyyymmddHHMMSS>-<6 random upper-case alphanumerics>"""
    now = now or datetime.utcnow()
    suffix = "".join(secrets.choice(_SUFFIX_ALPHABET) for _ in range(6))
    return f"ORD-{now.strftime('%Y%m%d%H%M%S')}-{suffix}"


class CheckoutOrderUseCase:
    """Everything from locking the cart to emptying it happens in one
    transaction; any failure leaves neither an order nor an emptied cart."""

    def __init__(self, unit_of_work: IUnitOfWork, payment_service: MockPaymentService):
        self.unit_of_work = unit_of_work
        self.payment_service = payment_service

    async def execute(self, user_id: UUID, request: CheckoutDto) -> OrderDto:
        owner = UserId(user_id)

        async with self.unit_of_work:
            cart = await self.unit_of_work.carts.get_for_user(owner, lock=True)
            if cart is None or cart.is_empty:
                raise BadRequestError("Cart is empty")
            restaurant = cart.restaurant
            if restaurant is None:
                raise BadRequestError("Cart has no restaurant")

            location = await self.unit_of_work.locations.get_for_user(request.delivery_location_id, owner)
            if not location:
                raise NotFoundError("Delivery location not found")

            payment_method = await self.unit_of_work.payment_methods.get_for_user(request.payment_method_id, owner)
            if not payment_method:
                raise NotFoundError("Payment method not found")

            subtotal = cart.subtotal
            if subtotal < restaurant.min_order_amount:
                shortfall = restaurant.min_order_amount - subtotal
                raise BadRequestError(
                    f"Minimum order amount for {restaurant.name} is {restaurant.min_order_amount}",
                    details={
                        "min_order_amount": str(restaurant.min_order_amount.amount),
                        "subtotal": str(subtotal.amount),
                        "shortfall": str(shortfall.amount),
                    },
                )

            pricing = OrderPricing.compute(subtotal, restaurant.delivery_fee, settings.VAT_PERCENTAGE)
            order_number = await self._unique_order_number()

            order = Order.from_cart(
                cart,
                order_number=order_number,
                location=location.to_delivery_location(),
                pricing=pricing,
                delivery_instructions=request.delivery_instructions,
            )
            await self.unit_of_work.orders.add(order)

            charge = await self.payment_service.charge(payment_method.card_token, pricing.total, order_number)
            if not charge.succeeded:
                raise BadRequestError("Payment failed", details={"reason": charge.error_message})

            transaction = PaymentTransaction(
                payment_method_id=payment_method.id,
                amount=pricing.total,
                status=charge.status,
                transaction_ref=charge.transaction_ref,
                processed_at=charge.processed_at,
            )
            await self.unit_of_work.orders.add_transaction(order.id, transaction)

            order.mark_placed(transaction)
            await self.unit_of_work.orders.update(order)
            await self.unit_of_work.carts.clear(cart.id)
            await self.unit_of_work.commit()

            for event in order.get_events():
                logger.info("Order event: %s", event)

            placed = await self.unit_of_work.orders.get_by_id(order.id)
            return OrderDto.from_entity(placed)

    async def _unique_order_number(self) -> str:
        # The unique constraint on orders.order_number is the backstop
        for _ in range(settings.ORDER_NUMBER_MAX_ATTEMPTS):
            candidate = generate_order_number()
            if not await self.unit_of_work.orders.exists_by_order_number(candidate):
                return candidate
        logger.error("No free order number after %d attempts", settings.ORDER_NUMBER_MAX_ATTEMPTS)
        raise AppError()
