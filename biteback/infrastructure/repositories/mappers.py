"""Shared ORM -> domain mapping helpers"""

from ...core.config import settings
from ...domain.entities.cart import RestaurantSummary
from ...domain.value_objects.money import Money
from ..orm.restaurant_model import RestaurantModel


def to_money(amount) -> Money:
    return Money(amount if amount is not None else 0, settings.CURRENCY)


def to_restaurant_summary(model: RestaurantModel) -> RestaurantSummary:
    return RestaurantSummary(
        id=model.id,
        name=model.name,
        owner_id=model.owner_id,
        delivery_fee=to_money(model.delivery_fee),
        min_order_amount=to_money(model.min_order_amount),
        avg_delivery_time=model.avg_delivery_time or 30,
        logo_url=model.logo_url,
    )
