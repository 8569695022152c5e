"""Pricing arithmetic and order capability rules"""

import re
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from uuid import uuid4

import pytest

from biteback.application.use_cases.checkout_order import generate_order_number
from biteback.core.exceptions import BadRequestError, ForbiddenError
from biteback.domain.authorization import CurrentUser, can_view_order, ensure_can_change_status
from biteback.domain.entities.cart import Cart, CartLine, CartLineAddOn, RestaurantSummary
from biteback.domain.entities.order import DeliveryLocation, Order, OrderPricing, PaymentTransaction
from biteback.domain.enums import OrderStatus, PaymentStatus, UserRole
from biteback.domain.value_objects.entity_ids import UserId
from biteback.domain.value_objects.money import Money


def _restaurant(owner_id=None):
    return RestaurantSummary(
        id=uuid4(),
        name="Cairo Grill",
        owner_id=owner_id,
        delivery_fee=Money.of("15.00"),
        min_order_amount=Money.of("50.00"),
    )


def _line(restaurant, price, quantity, add_ons=()):
    return CartLine(
        id=uuid4(),
        menu_item_id=uuid4(),
        name="Item",
        unit_price=Money.of(price),
        quantity=quantity,
        restaurant=restaurant,
        add_ons=[
            CartLineAddOn(id=uuid4(), add_on_option_id=uuid4(), name="Extra", price=Money.of(p), quantity=q)
            for p, q in add_ons
        ],
    )


def _placed_order(user_id, owner_id):
    restaurant = _restaurant(owner_id)
    cart = Cart(id=uuid4(), user_id=UserId(user_id), lines=[_line(restaurant, "60.00", 1)])
    pricing = OrderPricing.compute(cart.subtotal, restaurant.delivery_fee, Decimal("14"))
    location = DeliveryLocation(id=uuid4(), label="Home", address="12 Tahrir St")
    order = Order.from_cart(cart, "ORD-20260101000000-ABC123", location, pricing)
    order.mark_placed(PaymentTransaction(
        payment_method_id=uuid4(),
        amount=pricing.total,
        status=PaymentStatus.PAID,
        transaction_ref="TXN-1",
        processed_at=datetime.utcnow(),
    ))
    return order


def test_money_rejects_floats_and_negatives():
    with pytest.raises(TypeError):
        Money(0.1)
    with pytest.raises(ValueError):
        Money.of("-1")


def test_money_percentage_rounds_half_up():
    assert Money.of("59.75").percentage(14).amount == Decimal("8.37")
    assert Money.of("0.25").percentage(10).amount == Decimal("0.03")
    assert Money.of("100").percentage("14").amount == Decimal("14.00")


def test_currency_mismatch():
    with pytest.raises(ValueError):
        Money.of("1", "EGP") + Money.of("1", "USD")


def test_line_total_formula():
    line = _line(_restaurant(), "40.00", 3, add_ons=[("5.00", 2), ("7.25", 1)])

    assert line.add_ons_total.amount == Decimal("17.25")
    assert line.line_total.amount == Decimal("171.75")


@pytest.mark.parametrize("subtotal", ["0.01", "33.33", "59.75", "131.50", "999.99"])
def test_total_balances(subtotal):
    pricing = OrderPricing.compute(Money.of(subtotal), Money.of("15.00"), Decimal("14"))

    expected_vat = (Decimal(subtotal) * Decimal("14") / 100).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    assert pricing.vat_amount.amount == expected_vat
    assert pricing.total.amount == Decimal(subtotal) + Decimal("15.00") + expected_vat


def test_order_from_empty_cart_is_rejected():
    cart = Cart(id=uuid4(), user_id=UserId(uuid4()))
    pricing = OrderPricing.compute(Money.zero(), Money.zero(), Decimal("14"))
    location = DeliveryLocation(id=uuid4(), label="Home", address="12 Tahrir St")

    with pytest.raises(ValueError):
        Order.from_cart(cart, "ORD-1", location, pricing)


def test_order_is_placed_only_with_successful_payment():
    order = _placed_order(uuid4(), uuid4())

    assert order.status == OrderStatus.PLACED
    assert order.is_paid
    with pytest.raises(ValueError):
        order.mark_placed(order.transaction)


def test_order_number_format():
    number = generate_order_number(datetime(2026, 10, 19, 8, 30, 5))

    assert re.fullmatch(r"ORD-20261019083005-[A-Z0-9]{6}", number)
    assert generate_order_number() != generate_order_number()


def test_capability_rules():
    customer, owner, stranger = uuid4(), uuid4(), uuid4()
    order = _placed_order(customer, owner)

    as_user = CurrentUser(id=customer, email="u@example.com", role=UserRole.USER, is_phone_verified=True)
    as_owner = CurrentUser(id=owner, email="o@example.com", role=UserRole.RESTAURANT_OWNER, is_phone_verified=True)
    as_stranger = CurrentUser(id=stranger, email="s@example.com", role=UserRole.USER, is_phone_verified=True)
    as_admin = CurrentUser(id=stranger, email="a@example.com", role=UserRole.ADMIN, is_phone_verified=True)

    assert can_view_order(as_user, order)
    assert can_view_order(as_owner, order)
    assert can_view_order(as_admin, order)
    assert not can_view_order(as_stranger, order)

    with pytest.raises(ForbiddenError):
        ensure_can_change_status(as_user, order, OrderStatus.CONFIRMED)
    with pytest.raises(ForbiddenError):
        ensure_can_change_status(as_stranger, order, OrderStatus.CANCELLED)
    ensure_can_change_status(as_user, order, OrderStatus.CANCELLED)
    ensure_can_change_status(as_owner, order, OrderStatus.OUT_FOR_DELIVERY)
    ensure_can_change_status(as_admin, order, OrderStatus.PENDING_PAYMENT)

    order.change_status(OrderStatus.CONFIRMED)
    assert order.confirmed_at is not None
    with pytest.raises(BadRequestError):
        ensure_can_change_status(as_user, order, OrderStatus.CANCELLED)
