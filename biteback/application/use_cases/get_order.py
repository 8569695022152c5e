"""Get order use case"""

from uuid import UUID

from ...core.exceptions import NotFoundError
from ...domain.authorization import CurrentUser, ensure_can_view_order
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...domain.value_objects.entity_ids import OrderId
from ..dtos.order_dtos import OrderDto


class GetOrderUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, actor: CurrentUser, order_id: UUID) -> OrderDto:
        async with self.unit_of_work:
            order = await self.unit_of_work.orders.get_by_id(OrderId(order_id))
        if not order:
            raise NotFoundError("Order not found")

        ensure_can_view_order(actor, order)
        return OrderDto.from_entity(order)
