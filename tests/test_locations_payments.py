"""Saved delivery locations and payment methods"""

import uuid

from conftest import API, add_card, add_location, bearer, signup


def _by_id(items):
    return {item["id"]: item for item in items}


def test_first_location_becomes_default(client, user_headers):
    home = add_location(client, user_headers)
    work = add_location(client, user_headers, label="Work", address="5 Smart Village")

    assert home["is_default"] is True
    assert work["is_default"] is False


def test_new_default_location_replaces_old_one(client, user_headers):
    home = add_location(client, user_headers)
    work = add_location(client, user_headers, label="Work", address="5 Smart Village", is_default=True)

    listed = _by_id(client.get(f"{API}/locations", headers=user_headers).json()["data"])

    assert listed[work["id"]]["is_default"] is True
    assert listed[home["id"]]["is_default"] is False


def test_update_location_ignores_nulls_for_required_fields(client, user_headers):
    home = add_location(client, user_headers, landmark="Near the mosque")

    response = client.patch(
        f"{API}/locations/{home['id']}",
        json={"label": None, "address": "14 Tahrir St", "landmark": None},
        headers=user_headers,
    )

    assert response.status_code == 200
    updated = response.json()["data"]
    assert updated["label"] == "Home"
    assert updated["address"] == "14 Tahrir St"
    assert updated["landmark"] is None


def test_set_default_and_delete_location(client, user_headers):
    home = add_location(client, user_headers)
    work = add_location(client, user_headers, label="Work", address="5 Smart Village")

    promoted = client.patch(f"{API}/locations/{work['id']}/default", headers=user_headers)
    assert promoted.json()["data"]["is_default"] is True

    assert client.delete(f"{API}/locations/{work['id']}", headers=user_headers).status_code == 200

    [remaining] = client.get(f"{API}/locations", headers=user_headers).json()["data"]
    assert remaining["id"] == home["id"]
    assert remaining["is_default"] is True


def test_locations_are_private(client, user_headers):
    home = add_location(client, user_headers)
    other = bearer(signup(client, email="omar@example.com", phone="+201555555555")["tokens"]["access_token"])

    assert client.get(f"{API}/locations/{home['id']}", headers=other).status_code == 404
    assert client.delete(f"{API}/locations/{home['id']}", headers=other).status_code == 404
    assert client.get(f"{API}/locations/{uuid.uuid4()}", headers=user_headers).status_code == 404
    assert client.get(f"{API}/locations", headers=other).json()["data"] == []


def test_card_is_tokenized(client, user_headers):
    card = add_card(client, user_headers, card_number="4111111111111111")

    assert card["last_four_digits"] == "1111"
    assert card["card_brand"] == "Visa"
    assert card["type"] == "CREDIT_CARD"
    assert card["is_default"] is True
    assert "card_number" not in card
    assert "card_token" not in card
    assert "cvv" not in card


def test_card_brands(client, user_headers):
    numbers = {
        "5555555555554444": "Mastercard",
        "378282246310005": "Amex",
        "6011111111111117": "Discover",
        "9999999999999999": "Unknown",
    }
    for number, brand in numbers.items():
        assert add_card(client, user_headers, card_number=number)["card_brand"] == brand


def test_invalid_card_details_are_rejected(client, user_headers):
    bad_cards = [
        {"card_number": "4111", "expiry_month": 12, "expiry_year": 2030, "cvv": "123"},
        {"card_number": "4111111111111111", "expiry_month": 13, "expiry_year": 2030, "cvv": "123"},
        {"card_number": "4111111111111111", "expiry_month": 12, "expiry_year": 2030, "cvv": "12"},
    ]
    for body in bad_cards:
        response = client.post(f"{API}/payment-methods", json=body, headers=user_headers)
        assert response.status_code == 422


def test_removing_default_card_promotes_another(client, user_headers):
    visa = add_card(client, user_headers)
    mastercard = add_card(client, user_headers, card_number="5555555555554444")

    default = client.patch(f"{API}/payment-methods/{mastercard['id']}/default", headers=user_headers)
    assert default.json()["data"]["is_default"] is True

    listed = _by_id(client.get(f"{API}/payment-methods", headers=user_headers).json()["data"])
    assert listed[visa["id"]]["is_default"] is False

    assert client.delete(f"{API}/payment-methods/{mastercard['id']}", headers=user_headers).status_code == 200

    [remaining] = client.get(f"{API}/payment-methods", headers=user_headers).json()["data"]
    assert remaining["id"] == visa["id"]
    assert remaining["is_default"] is True


def test_payment_methods_are_private(client, user_headers):
    card = add_card(client, user_headers)
    other = bearer(signup(client, email="omar@example.com", phone="+201555555555")["tokens"]["access_token"])

    assert client.delete(f"{API}/payment-methods/{card['id']}", headers=other).status_code == 404
    assert client.patch(f"{API}/payment-methods/{card['id']}/default", headers=other).status_code == 404
