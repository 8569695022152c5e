"""Read-only menu lookups used by the cart"""

from typing import List, Optional
from uuid import UUID

from sqlalchemy.orm import Session

from ...domain.entities.menu import AddOnOptionInfo, MenuItemInfo
from ...domain.repositories.cart_repository import IMenuRepository
from ..orm.restaurant_model import AddOnGroupModel, AddOnOptionModel, MenuItemModel, RestaurantModel
from .mappers import to_money


class MenuRepositoryImpl(IMenuRepository):

    def __init__(self, session: Session):
        self.session = session

    async def get_available_item(self, menu_item_id: UUID) -> Optional[MenuItemInfo]:
        model = self.session.query(MenuItemModel).join(RestaurantModel).filter(
            MenuItemModel.id == menu_item_id,
            MenuItemModel.is_available.is_(True),
            RestaurantModel.is_active.is_(True),
        ).first()
        if model is None:
            return None
        price = model.discount_price if model.discount_price is not None else model.price
        return MenuItemInfo(
            id=model.id,
            name=model.name,
            restaurant_id=model.restaurant_id,
            price=to_money(price),
        )

    async def get_available_add_ons(self, option_ids: List[UUID]) -> List[AddOnOptionInfo]:
        if not option_ids:
            return []
        rows = self.session.query(AddOnOptionModel, AddOnGroupModel.menu_item_id).join(AddOnGroupModel).filter(
            AddOnOptionModel.id.in_(option_ids),
            AddOnOptionModel.is_available.is_(True),
        ).all()
        return [
            AddOnOptionInfo(
                id=option.id,
                menu_item_id=menu_item_id,
                name=option.name,
                price=to_money(option.price),
            )
            for option, menu_item_id in rows
        ]
