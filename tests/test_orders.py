"""Order visibility and status changes per role"""

import uuid

import pytest

from biteback.domain.enums import UserRole

from conftest import API, add_card, add_location, add_to_cart, bearer, checkout, login, set_role, signup


def _customer(client, email, phone):
    headers = bearer(signup(client, email=email, phone=phone)["tokens"]["access_token"])
    return {
        "headers": headers,
        "location_id": add_location(client, headers)["id"],
        "card_id": add_card(client, headers)["id"],
    }


def _place_order(client, menu, customer):
    add_to_cart(client, customer["headers"], menu["burger"], quantity=2)
    response = checkout(client, customer["headers"], customer["location_id"], customer["card_id"])
    assert response.status_code == 201, response.text
    return response.json()["data"]


def _set_status(client, headers, order_id, status, reason=None):
    body = {"status": status}
    if reason:
        body["cancellation_reason"] = reason
    return client.patch(f"{API}/orders/{order_id}/status", json=body, headers=headers)


def _staff(client, email, phone, role):
    signup(client, email=email, phone=phone)
    set_role(email, role)
    return bearer(login(client, email)["tokens"]["access_token"])


@pytest.fixture
def amira(client):
    return _customer(client, "amira@example.com", "+201234567890")


@pytest.fixture
def omar(client):
    return _customer(client, "omar@example.com", "+201555555555")


@pytest.fixture
def owner_headers(client, menu):
    return bearer(login(client, "owner@example.com")["tokens"]["access_token"])


def test_orders_are_scoped_by_role(client, menu, amira, omar, owner_headers):
    mine = _place_order(client, menu, amira)
    admin_headers = _staff(client, "admin@example.com", "+201777777777", UserRole.ADMIN)
    stranger_owner = _staff(client, "chef@example.com", "+201888888888", UserRole.RESTAURANT_OWNER)

    def listed(headers):
        return [order["id"] for order in client.get(f"{API}/orders", headers=headers).json()["data"]["items"]]

    assert listed(amira["headers"]) == [mine["id"]]
    assert listed(omar["headers"]) == []
    assert listed(owner_headers) == [mine["id"]]
    assert listed(stranger_owner) == []
    assert listed(admin_headers) == [mine["id"]]


def test_list_orders_paginates(client, menu, amira):
    placed = [_place_order(client, menu, amira)["id"] for _ in range(3)]

    first = client.get(f"{API}/orders", params={"page": 1, "limit": 2}, headers=amira["headers"]).json()["data"]
    second = client.get(f"{API}/orders", params={"page": 2, "limit": 2}, headers=amira["headers"]).json()["data"]

    assert first["pagination"] == {
        "page": 1, "limit": 2, "total": 3, "total_pages": 2, "has_next": True, "has_prev": False,
    }
    assert second["pagination"]["has_next"] is False
    assert second["pagination"]["has_prev"] is True
    listed = [order["id"] for order in first["items"] + second["items"]]
    assert sorted(listed) == sorted(placed)


def test_list_orders_limit_is_capped(client, amira):
    response = client.get(f"{API}/orders", params={"limit": 51}, headers=amira["headers"])

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


def test_list_orders_filters_by_status(client, menu, amira):
    keep = _place_order(client, menu, amira)
    cancel = _place_order(client, menu, amira)
    _set_status(client, amira["headers"], cancel["id"], "CANCELLED", "Changed my mind")

    placed = client.get(f"{API}/orders", params={"status": "PLACED"}, headers=amira["headers"]).json()["data"]
    cancelled = client.get(f"{API}/orders", params={"status": "CANCELLED"}, headers=amira["headers"]).json()["data"]

    assert [order["id"] for order in placed["items"]] == [keep["id"]]
    assert [order["id"] for order in cancelled["items"]] == [cancel["id"]]


def test_get_order_visibility(client, menu, amira, omar, owner_headers):
    order = _place_order(client, menu, amira)

    assert client.get(f"{API}/orders/{order['id']}", headers=amira["headers"]).status_code == 200
    assert client.get(f"{API}/orders/{order['id']}", headers=owner_headers).status_code == 200

    forbidden = client.get(f"{API}/orders/{order['id']}", headers=omar["headers"])
    assert forbidden.status_code == 403
    assert forbidden.json()["error"]["code"] == "FORBIDDEN"

    missing = client.get(f"{API}/orders/{uuid.uuid4()}", headers=amira["headers"])
    assert missing.status_code == 404


def test_user_can_only_cancel_own_placed_order(client, menu, amira, omar):
    order = _place_order(client, menu, amira)

    for status in ("CONFIRMED", "PREPARING", "DELIVERED"):
        response = _set_status(client, amira["headers"], order["id"], status)
        assert response.status_code == 403

    assert _set_status(client, omar["headers"], order["id"], "CANCELLED").status_code == 403

    cancelled = _set_status(client, amira["headers"], order["id"], "CANCELLED", "Ordered by mistake")
    assert cancelled.status_code == 200
    data = cancelled.json()["data"]
    assert data["status"] == "CANCELLED"
    assert data["cancelled_at"] is not None
    assert data["cancellation_reason"] == "Ordered by mistake"

    again = _set_status(client, amira["headers"], order["id"], "CANCELLED")
    assert again.status_code == 400


def test_user_cannot_cancel_confirmed_order(client, menu, amira, owner_headers):
    order = _place_order(client, menu, amira)
    assert _set_status(client, owner_headers, order["id"], "CONFIRMED").status_code == 200

    response = _set_status(client, amira["headers"], order["id"], "CANCELLED")

    assert response.status_code == 400
    assert response.json()["error"]["message"] == "Order cannot be cancelled at this stage"


def test_owner_moves_orders_of_own_restaurant_only(client, menu, amira, owner_headers):
    order = _place_order(client, menu, amira)
    stranger_owner = _staff(client, "chef@example.com", "+201888888888", UserRole.RESTAURANT_OWNER)

    assert _set_status(client, stranger_owner, order["id"], "CONFIRMED").status_code == 403

    confirmed = _set_status(client, owner_headers, order["id"], "CONFIRMED").json()["data"]
    preparing = _set_status(client, owner_headers, order["id"], "PREPARING").json()["data"]

    assert confirmed["confirmed_at"] is not None
    assert preparing["status"] == "PREPARING"
    assert preparing["preparing_at"] is not None


def test_admin_can_set_any_status(client, menu, amira):
    order = _place_order(client, menu, amira)
    admin_headers = _staff(client, "admin@example.com", "+201777777777", UserRole.ADMIN)

    response = _set_status(client, admin_headers, order["id"], "DELIVERED")

    assert response.status_code == 200
    assert response.json()["data"]["status"] == "DELIVERED"
    assert response.json()["data"]["delivered_at"] is not None


def test_update_status_of_missing_order(client, amira):
    response = _set_status(client, amira["headers"], uuid.uuid4(), "CANCELLED")

    assert response.status_code == 404
