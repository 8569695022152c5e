"""Update order status use case"""

import logging
from uuid import UUID

from ...core.exceptions import NotFoundError
from ...domain.authorization import CurrentUser, ensure_can_change_status
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...domain.value_objects.entity_ids import OrderId
from ..dtos.order_dtos import OrderDto, UpdateOrderStatusDto

logger = logging.getLogger(__name__)


class UpdateOrderStatusUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, actor: CurrentUser, order_id: UUID, request: UpdateOrderStatusDto) -> OrderDto:
        async with self.unit_of_work:
            order = await self.unit_of_work.orders.get_by_id(OrderId(order_id))
            if not order:
                raise NotFoundError("Order not found")

            ensure_can_change_status(actor, order, request.status)

            order.change_status(request.status, reason=request.cancellation_reason)
            await self.unit_of_work.orders.update(order)
            await self.unit_of_work.commit()

        for event in order.get_events():
            logger.info("Order event: %s", event)
        return OrderDto.from_entity(order)
