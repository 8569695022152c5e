"""List orders use case"""

from typing import Optional

from ...domain.authorization import CurrentUser
from ...domain.enums import OrderStatus, UserRole
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...domain.value_objects.entity_ids import UserId
from ..dtos.common import Paginated, Pagination
from ..dtos.order_dtos import OrderDto


class ListOrdersUseCase:
    """Users see their own orders, owners their restaurants' orders, admins all."""

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(
        self,
        actor: CurrentUser,
        page: int = 1,
        limit: int = 10,
        status: Optional[OrderStatus] = None,
    ) -> Paginated[OrderDto]:
        scope = {}
        if actor.role == UserRole.USER:
            scope["user_id"] = UserId(actor.id)
        elif actor.role == UserRole.RESTAURANT_OWNER:
            scope["restaurant_owner_id"] = actor.id

        async with self.unit_of_work:
            orders, total = await self.unit_of_work.orders.list_paginated(
                page=page,
                limit=limit,
                status=status,
                **scope,
            )

        return Paginated[OrderDto](
            items=[OrderDto.from_entity(order) for order in orders],
            pagination=Pagination.build(page, limit, total),
        )
