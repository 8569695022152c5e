"""Saved payment method use cases"""

import logging
from typing import List
from uuid import UUID

from ...core.exceptions import BadRequestError, NotFoundError
from ...domain.entities.payment_method import PaymentMethod
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...domain.value_objects.entity_ids import UserId
from ..dtos.common import MessageResponse
from ..dtos.payment_dtos import AddPaymentMethodDto, PaymentMethodDto

logger = logging.getLogger(__name__)

PAYMENT_METHOD_NOT_FOUND = "Payment method not found"


class ListPaymentMethodsUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, user_id: UUID) -> List[PaymentMethodDto]:
        async with self.unit_of_work:
            methods = await self.unit_of_work.payment_methods.list_for_user(UserId(user_id))
        return [PaymentMethodDto.from_entity(method) for method in methods]


class AddPaymentMethodUseCase:
    """Tokenizes the card; the CVV is validated by the DTO and then dropped"""

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, user_id: UUID, request: AddPaymentMethodDto) -> PaymentMethodDto:
        owner = UserId(user_id)
        async with self.unit_of_work:
            methods = self.unit_of_work.payment_methods
            make_default = request.is_default or await methods.count_for_user(owner) == 0
            if make_default:
                await methods.clear_default(owner)

            method = PaymentMethod.from_card(
                user_id=owner,
                method_type=request.type,
                card_number=request.card_number,
                expiry_month=request.expiry_month,
                expiry_year=request.expiry_year,
                is_default=make_default,
            )
            await methods.add(method)
            await self.unit_of_work.commit()

        logger.info("Payment method %s added for user %s", method.id, user_id)
        return PaymentMethodDto.from_entity(method)


class RemovePaymentMethodUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, user_id: UUID, payment_method_id: UUID) -> MessageResponse:
        owner = UserId(user_id)
        async with self.unit_of_work:
            methods = self.unit_of_work.payment_methods
            method = await methods.get_for_user(payment_method_id, owner)
            if not method:
                raise NotFoundError(PAYMENT_METHOD_NOT_FOUND)

            if await methods.has_pending_transactions(method.id):
                raise BadRequestError("Cannot remove a payment method with pending transactions")

            await methods.delete(method.id)

            if method.is_default:
                successor = await methods.get_most_recent(owner)
                if successor:
                    await methods.set_default(successor.id)

            await self.unit_of_work.commit()

        return MessageResponse(message="Payment method removed successfully")


class SetDefaultPaymentMethodUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, user_id: UUID, payment_method_id: UUID) -> PaymentMethodDto:
        owner = UserId(user_id)
        async with self.unit_of_work:
            methods = self.unit_of_work.payment_methods
            method = await methods.get_for_user(payment_method_id, owner)
            if not method:
                raise NotFoundError(PAYMENT_METHOD_NOT_FOUND)

            await methods.clear_default(owner)
            await methods.set_default(method.id)
            await self.unit_of_work.commit()

        method.is_default = True
        return PaymentMethodDto.from_entity(method)
