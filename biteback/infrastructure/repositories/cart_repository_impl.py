"""Cart repository implementation using SQLAlchemy ORM"""

from datetime import datetime
from typing import Optional, Sequence, Tuple
from uuid import UUID

from sqlalchemy.orm import Session

from ...core.config import settings
from ...domain.entities.cart import Cart, CartLine, CartLineAddOn
from ...domain.repositories.cart_repository import ICartRepository
from ...domain.value_objects.entity_ids import UserId
from ..orm.cart_model import CartModel, CartItemModel, CartItemAddOnModel
from .mappers import to_money, to_restaurant_summary


class CartRepositoryImpl(ICartRepository):
    """Carts are edited through the ORM collections so the delete-orphan
    cascade removes add-on rows together with their line."""

    def __init__(self, session: Session):
        self.session = session

    async def get_for_user(self, user_id: UserId, lock: bool = False) -> Optional[Cart]:
        query = self.session.query(CartModel).filter(CartModel.user_id == user_id.value)
        if lock:
            # Lock the cart row only; lines load lazily afterwards
            query = query.with_for_update()
        model = query.first()
        return self._map_to_entity(model) if model else None

    async def get_or_create(self, user_id: UserId) -> Cart:
        model = self._get_model(user_id)
        if model is None:
            now = datetime.utcnow()
            model = CartModel(user_id=user_id.value, created_at=now, updated_at=now)
            self.session.add(model)
            self.session.flush()
        return self._map_to_entity(model)

    async def add_line(
        self,
        cart_id: UUID,
        menu_item_id: UUID,
        quantity: int,
        special_instructions: Optional[str],
        add_ons: Sequence[Tuple[UUID, int]],
    ) -> UUID:
        cart = self.session.query(CartModel).filter(CartModel.id == cart_id).one()
        line = CartItemModel(
            menu_item_id=menu_item_id,
            quantity=quantity,
            special_instructions=special_instructions,
            created_at=datetime.utcnow(),
            add_ons=[
                CartItemAddOnModel(add_on_option_id=option_id, quantity=add_on_quantity)
                for option_id, add_on_quantity in add_ons
            ],
        )
        cart.items.append(line)
        cart.updated_at = datetime.utcnow()
        self.session.flush()
        return line.id

    async def line_belongs_to(self, line_id: UUID, user_id: UserId) -> bool:
        return self.session.query(CartItemModel.id).join(CartModel).filter(
            CartItemModel.id == line_id,
            CartModel.user_id == user_id.value,
        ).first() is not None

    async def update_line(
        self,
        line_id: UUID,
        quantity: Optional[int] = None,
        special_instructions: Optional[str] = None,
    ) -> None:
        line = self.session.query(CartItemModel).filter(CartItemModel.id == line_id).first()
        if line is None:
            return
        if quantity is not None:
            line.quantity = quantity
        if special_instructions is not None:
            line.special_instructions = special_instructions
        self.session.flush()

    async def remove_line(self, line_id: UUID) -> None:
        line = self.session.query(CartItemModel).filter(CartItemModel.id == line_id).first()
        if line is None:
            return
        line.cart.items.remove(line)
        self.session.flush()

    async def clear(self, cart_id: UUID) -> int:
        cart = self.session.query(CartModel).filter(CartModel.id == cart_id).first()
        if cart is None:
            return 0
        removed = len(cart.items)
        cart.items.clear()
        cart.updated_at = datetime.utcnow()
        self.session.flush()
        return removed

    def _get_model(self, user_id: UserId) -> Optional[CartModel]:
        return self.session.query(CartModel).filter(CartModel.user_id == user_id.value).first()

    def _map_to_entity(self, model: CartModel) -> Cart:
        lines = []
        for item in model.items:
            menu_item = item.menu_item
            unit_price = menu_item.discount_price if menu_item.discount_price is not None else menu_item.price
            lines.append(CartLine(
                id=item.id,
                menu_item_id=menu_item.id,
                name=menu_item.name,
                unit_price=to_money(unit_price),
                quantity=item.quantity,
                restaurant=to_restaurant_summary(menu_item.restaurant),
                special_instructions=item.special_instructions,
                image_url=menu_item.image_url,
                add_ons=[
                    CartLineAddOn(
                        id=add_on.id,
                        add_on_option_id=add_on.add_on_option_id,
                        name=add_on.add_on_option.name,
                        price=to_money(add_on.add_on_option.price),
                        quantity=add_on.quantity,
                    )
                    for add_on in item.add_ons
                ],
            ))
        return Cart(id=model.id, user_id=UserId(model.user_id), lines=lines, currency=settings.CURRENCY)
