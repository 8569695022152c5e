"""Checkout: pricing, validation and all-or-nothing persistence"""

import re
import uuid
from decimal import Decimal

from fastapi.testclient import TestClient

from biteback.db.database import SessionLocal
from biteback.infrastructure.orm import MenuItemModel, OrderItemModel, OrderModel, PaymentTransactionModel
from biteback.infrastructure.repositories.order_repository_impl import OrderRepositoryImpl
from biteback.main import app

from conftest import API, add_card, add_location, add_to_cart, bearer, checkout, count_rows, signup


def _ready_user(client):
    headers = bearer(signup(client)["tokens"]["access_token"])
    location = add_location(client, headers)
    card = add_card(client, headers)
    return headers, location["id"], card["id"]


def test_checkout_prices_cart_with_add_ons(client, menu):
    headers, location_id, card_id = _ready_user(client)
    add_to_cart(client, headers, menu["burger"], quantity=2, add_ons=[
        {"add_on_option_id": menu["cheese"], "quantity": 1},
        {"add_on_option_id": menu["bacon"], "quantity": 2},
    ])
    add_to_cart(client, headers, menu["fries"])

    response = checkout(client, headers, location_id, card_id, delivery_instructions="Ring twice")

    assert response.status_code == 201, response.text
    order = response.json()["data"]
    # (40 + 5 + 2 x 7.25) x 2 + 12.50
    assert Decimal(order["subtotal"]) == Decimal("131.50")
    assert Decimal(order["delivery_fee"]) == Decimal("15.00")
    assert Decimal(order["vat_percentage"]) == Decimal("14")
    assert Decimal(order["vat_amount"]) == Decimal("18.41")
    assert Decimal(order["total"]) == Decimal("164.91")
    assert order["currency"] == "EGP"
    assert order["delivery_instructions"] == "Ring twice"


def test_checkout_rounds_vat_half_up_to_the_cent(client, menu):
    headers, location_id, card_id = _ready_user(client)
    add_to_cart(client, headers, menu["burger"], add_ons=[{"add_on_option_id": menu["bacon"], "quantity": 1}])
    add_to_cart(client, headers, menu["fries"])

    order = checkout(client, headers, location_id, card_id).json()["data"]

    # 59.75 x 14% = 8.365
    assert Decimal(order["subtotal"]) == Decimal("59.75")
    assert Decimal(order["vat_amount"]) == Decimal("8.37")
    assert Decimal(order["total"]) == Decimal("83.12")
    assert Decimal(order["total"]) == (
        Decimal(order["subtotal"]) + Decimal(order["delivery_fee"]) + Decimal(order["vat_amount"])
    )


def test_checkout_places_paid_order_and_empties_cart(client, menu):
    headers, location_id, card_id = _ready_user(client)
    add_to_cart(client, headers, menu["burger"], quantity=2, add_ons=[{"add_on_option_id": menu["cheese"], "quantity": 1}])

    order = checkout(client, headers, location_id, card_id).json()["data"]

    assert order["status"] == "PLACED"
    assert order["payment_status"] == "PAID"
    assert order["placed_at"] is not None
    assert order["estimated_delivery_time"] is not None
    assert re.fullmatch(r"ORD-\d{14}-[A-Z0-9]{6}", order["order_number"])
    assert order["restaurant"]["id"] == menu["restaurant_id"]
    assert order["location_id"] == location_id
    assert order["delivery_address"] == "12 Tahrir St, B4, Floor 3, Apt 12"

    transaction = order["transaction"]
    assert transaction["status"] == "PAID"
    assert transaction["payment_method_id"] == card_id
    assert Decimal(transaction["amount"]) == Decimal(order["total"])
    assert transaction["transaction_ref"].startswith("TXN-")

    [item] = order["items"]
    assert item["name"] == "Classic Burger"
    assert Decimal(item["price"]) == Decimal("40.00")
    assert item["quantity"] == 2
    assert Decimal(item["subtotal"]) == Decimal("90.00")
    assert [add_on["name"] for add_on in item["add_ons"]] == ["Cheese"]

    cart = client.get(f"{API}/cart", headers=headers).json()["data"]
    assert cart["items"] == []
    assert cart["restaurant"] is None
    assert count_rows(PaymentTransactionModel) == 1


def test_order_keeps_snapshot_after_menu_changes(client, menu):
    headers, location_id, card_id = _ready_user(client)
    add_to_cart(client, headers, menu["burger"], quantity=2)
    order = checkout(client, headers, location_id, card_id).json()["data"]

    session = SessionLocal()
    try:
        burger = session.get(MenuItemModel, uuid.UUID(menu["burger"]))
        burger.name = "Burger Deluxe"
        burger.price = Decimal("99.00")
        session.commit()
    finally:
        session.close()

    fetched = client.get(f"{API}/orders/{order['id']}", headers=headers).json()["data"]
    assert fetched["items"][0]["name"] == "Classic Burger"
    assert Decimal(fetched["items"][0]["price"]) == Decimal("40.00")
    assert Decimal(fetched["total"]) == Decimal(order["total"])


def test_checkout_with_empty_cart(client, menu):
    headers, location_id, card_id = _ready_user(client)

    response = checkout(client, headers, location_id, card_id)

    assert response.status_code == 400
    assert response.json()["error"]["message"] == "Cart is empty"


def test_checkout_below_minimum_order_creates_nothing(client, menu):
    headers, location_id, card_id = _ready_user(client)
    add_to_cart(client, headers, menu["fries"])

    response = checkout(client, headers, location_id, card_id)

    assert response.status_code == 400
    assert response.json()["error"]["details"] == {
        "min_order_amount": "50.00",
        "subtotal": "12.50",
        "shortfall": "37.50",
    }
    assert count_rows(OrderModel) == 0
    assert len(client.get(f"{API}/cart", headers=headers).json()["data"]["items"]) == 1


def test_checkout_requires_own_location_and_payment_method(client, menu):
    headers, location_id, card_id = _ready_user(client)
    add_to_cart(client, headers, menu["burger"], quantity=2)

    stranger = bearer(signup(client, email="omar@example.com", phone="+201555555555")["tokens"]["access_token"])
    foreign_location = add_location(client, stranger, label="Work")["id"]
    foreign_card = add_card(client, stranger, card_number="5555555555554444")["id"]

    cases = [
        (foreign_location, card_id, "Delivery location not found"),
        (str(uuid.uuid4()), card_id, "Delivery location not found"),
        (location_id, foreign_card, "Payment method not found"),
        (location_id, str(uuid.uuid4()), "Payment method not found"),
    ]
    for location, card, message in cases:
        response = checkout(client, headers, location, card)
        assert response.status_code == 404
        assert response.json()["error"]["message"] == message

    assert count_rows(OrderModel) == 0


def test_checkout_rolls_back_when_a_late_step_fails(client, menu, monkeypatch):
    headers, location_id, card_id = _ready_user(client)
    add_to_cart(client, headers, menu["burger"], quantity=2)

    async def broken_add_transaction(self, order_id, transaction):
        raise RuntimeError("database went away")

    monkeypatch.setattr(OrderRepositoryImpl, "add_transaction", broken_add_transaction)
    failing_client = TestClient(app, raise_server_exceptions=False)

    response = checkout(failing_client, headers, location_id, card_id)

    assert response.status_code == 500
    assert response.json()["error"] == {"code": "INTERNAL_ERROR", "message": "Internal server error"}
    assert count_rows(OrderModel) == 0
    assert count_rows(OrderItemModel) == 0
    assert len(client.get(f"{API}/cart", headers=headers).json()["data"]["items"]) == 1


def test_second_checkout_of_same_cart_fails(client, menu):
    headers, location_id, card_id = _ready_user(client)
    add_to_cart(client, headers, menu["burger"], quantity=2)

    first = checkout(client, headers, location_id, card_id)
    second = checkout(client, headers, location_id, card_id)

    assert first.status_code == 201
    assert second.status_code == 400
    assert count_rows(OrderModel) == 1
