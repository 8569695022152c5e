"""Cart lines, add-ons and the single-restaurant rule"""

import uuid
from decimal import Decimal

from conftest import API, add_to_cart, bearer, signup


def test_empty_cart_is_created_on_first_read(client, user_headers):
    response = client.get(f"{API}/cart", headers=user_headers)

    assert response.status_code == 200
    cart = response.json()["data"]
    assert cart["items"] == []
    assert cart["restaurant"] is None
    assert Decimal(cart["subtotal"]) == 0
    assert cart["currency"] == "EGP"


def test_line_total_includes_add_ons_times_quantity(client, menu, user_headers):
    cart = add_to_cart(client, user_headers, menu["burger"], quantity=3, add_ons=[
        {"add_on_option_id": menu["cheese"], "quantity": 2},
        {"add_on_option_id": menu["bacon"], "quantity": 1},
    ])

    [line] = cart["items"]
    assert Decimal(line["unit_price"]) == Decimal("40.00")
    assert Decimal(line["add_ons_total"]) == Decimal("17.25")
    assert Decimal(line["line_total"]) == Decimal("171.75")
    assert Decimal(cart["subtotal"]) == Decimal("171.75")
    assert cart["restaurant"]["id"] == menu["restaurant_id"]
    assert cart["total_quantity"] == 3


def test_repeated_add_on_selections_are_merged(client, menu, user_headers):
    cart = add_to_cart(client, user_headers, menu["burger"], add_ons=[
        {"add_on_option_id": menu["cheese"], "quantity": 1},
        {"add_on_option_id": menu["cheese"], "quantity": 2},
    ])

    [add_on] = cart["items"][0]["add_ons"]
    assert add_on["quantity"] == 3
    assert Decimal(add_on["subtotal"]) == Decimal("15.00")


def test_cart_accepts_one_restaurant_only(client, menu, user_headers):
    add_to_cart(client, user_headers, menu["burger"])

    response = client.post(f"{API}/cart/items", json={"menu_item_id": menu["maki"]}, headers=user_headers)

    assert response.status_code == 400
    assert "another restaurant" in response.json()["error"]["message"]


def test_unavailable_or_unknown_items_are_rejected(client, menu, user_headers):
    for menu_item_id in (menu["soldout"], str(uuid.uuid4())):
        response = client.post(f"{API}/cart/items", json={"menu_item_id": menu_item_id}, headers=user_headers)
        assert response.status_code == 404


def test_add_on_must_belong_to_the_item(client, menu, user_headers):
    response = client.post(f"{API}/cart/items", json={
        "menu_item_id": menu["fries"],
        "add_ons": [{"add_on_option_id": menu["cheese"], "quantity": 1}],
    }, headers=user_headers)

    assert response.status_code == 400
    assert response.json()["error"]["details"] == {"add_on_option_ids": [menu["cheese"]]}


def test_update_and_remove_lines(client, menu, user_headers):
    cart = add_to_cart(client, user_headers, menu["burger"])
    cart = add_to_cart(client, user_headers, menu["fries"], quantity=2)
    burger_line, fries_line = cart["items"]

    updated = client.patch(
        f"{API}/cart/items/{fries_line['id']}",
        json={"quantity": 4, "special_instructions": "Extra salt"},
        headers=user_headers,
    ).json()["data"]
    fries = next(line for line in updated["items"] if line["id"] == fries_line["id"])
    assert fries["quantity"] == 4
    assert fries["special_instructions"] == "Extra salt"
    assert Decimal(updated["subtotal"]) == Decimal("90.00")

    removed = client.delete(f"{API}/cart/items/{burger_line['id']}", headers=user_headers).json()["data"]
    assert [line["id"] for line in removed["items"]] == [fries_line["id"]]


def test_lines_of_another_user_are_not_found(client, menu, user_headers):
    line_id = add_to_cart(client, user_headers, menu["burger"])["items"][0]["id"]
    other = bearer(signup(client, email="omar@example.com", phone="+201555555555")["tokens"]["access_token"])

    assert client.patch(f"{API}/cart/items/{line_id}", json={"quantity": 2}, headers=other).status_code == 404
    assert client.delete(f"{API}/cart/items/{line_id}", headers=other).status_code == 404


def test_clear_cart_keeps_cart_and_allows_new_restaurant(client, menu, user_headers):
    cart_id = add_to_cart(client, user_headers, menu["burger"])["id"]

    cleared = client.delete(f"{API}/cart", headers=user_headers).json()["data"]
    assert cleared["id"] == cart_id
    assert cleared["items"] == []

    refilled = add_to_cart(client, user_headers, menu["maki"])
    assert refilled["restaurant"]["id"] == menu["other_restaurant_id"]
