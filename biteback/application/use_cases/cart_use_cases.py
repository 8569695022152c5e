"""Cart use cases"""

from typing import Dict
from uuid import UUID

from ...core.exceptions import BadRequestError, NotFoundError
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...domain.value_objects.entity_ids import UserId
from ..dtos.cart_dtos import AddCartItemDto, CartDto, UpdateCartItemDto


class GetCartUseCase:
    """Returns the user's cart, creating an empty one on first access"""

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, user_id: UUID) -> CartDto:
        async with self.unit_of_work:
            cart = await self.unit_of_work.carts.get_or_create(UserId(user_id))
            await self.unit_of_work.commit()
            return CartDto.from_entity(cart)


class AddCartItemUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, user_id: UUID, request: AddCartItemDto) -> CartDto:
        owner = UserId(user_id)
        async with self.unit_of_work:
            item = await self.unit_of_work.menu.get_available_item(request.menu_item_id)
            if not item:
                raise NotFoundError("Menu item not found or unavailable")

            cart = await self.unit_of_work.carts.get_or_create(owner)
            if not cart.accepts_restaurant(item.restaurant_id):
                raise BadRequestError(
                    "Your cart contains items from another restaurant. Clear the cart to add this item."
                )

            # Repeated selections of one option are merged
            selections: Dict[UUID, int] = {}
            for add_on in request.add_ons:
                selections[add_on.add_on_option_id] = selections.get(add_on.add_on_option_id, 0) + add_on.quantity

            if selections:
                options = await self.unit_of_work.menu.get_available_add_ons(list(selections))
                valid_ids = {option.id for option in options if option.menu_item_id == item.id}
                invalid = [str(option_id) for option_id in selections if option_id not in valid_ids]
                if invalid:
                    raise BadRequestError(
                        "One or more add-ons are unavailable or do not belong to this item",
                        details={"add_on_option_ids": invalid},
                    )

            await self.unit_of_work.carts.add_line(
                cart_id=cart.id,
                menu_item_id=item.id,
                quantity=request.quantity,
                special_instructions=request.special_instructions,
                add_ons=list(selections.items()),
            )
            await self.unit_of_work.commit()

            updated = await self.unit_of_work.carts.get_for_user(owner)
            return CartDto.from_entity(updated)


class UpdateCartItemUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, user_id: UUID, item_id: UUID, request: UpdateCartItemDto) -> CartDto:
        owner = UserId(user_id)
        async with self.unit_of_work:
            if not await self.unit_of_work.carts.line_belongs_to(item_id, owner):
                raise NotFoundError("Cart item not found")

            await self.unit_of_work.carts.update_line(
                item_id,
                quantity=request.quantity,
                special_instructions=request.special_instructions,
            )
            await self.unit_of_work.commit()

            updated = await self.unit_of_work.carts.get_for_user(owner)
            return CartDto.from_entity(updated)


class RemoveCartItemUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, user_id: UUID, item_id: UUID) -> CartDto:
        owner = UserId(user_id)
        async with self.unit_of_work:
            if not await self.unit_of_work.carts.line_belongs_to(item_id, owner):
                raise NotFoundError("Cart item not found")

            await self.unit_of_work.carts.remove_line(item_id)
            await self.unit_of_work.commit()

            updated = await self.unit_of_work.carts.get_for_user(owner)
            return CartDto.from_entity(updated)


class ClearCartUseCase:
    """Deletes every line but keeps the cart row"""

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, user_id: UUID) -> CartDto:
        owner = UserId(user_id)
        async with self.unit_of_work:
            cart = await self.unit_of_work.carts.get_or_create(owner)
            await self.unit_of_work.carts.clear(cart.id)
            await self.unit_of_work.commit()

            updated = await self.unit_of_work.carts.get_for_user(owner)
            return CartDto.from_entity(updated)
