"""Shared fixtures: in-memory database, fake cache and a seeded menu"""

import os

os.environ["TESTING"] = "true"
os.environ["ENVIRONMENT"] = "development"
os.environ["BCRYPT_ROUNDS"] = "4"

from decimal import Decimal
from typing import Dict, Optional, Tuple

import pytest
from fastapi.testclient import TestClient

from biteback.api.dependencies import get_cache_client
from biteback.core.security import get_password_hash
from biteback.db.database import SessionLocal, engine
from biteback.db.models import Base
from biteback.domain.enums import UserRole
from biteback.domain.repositories.cache_client import ICacheClient
from biteback.infrastructure.orm import (
    AddOnGroupModel,
    AddOnOptionModel,
    MenuItemModel,
    RestaurantModel,
    UserModel,
)
from biteback.main import app

API = "/api/v1"
PASSWORD = "Secret123!"


class FakeCacheClient(ICacheClient):
    """Dict-backed cache whose clock only moves when a test calls ``advance``"""

    def __init__(self):
        self.now = 1_000_000.0
        self._store: Dict[str, Tuple[str, Optional[float]]] = {}

    def advance(self, seconds: float) -> None:
        self.now += seconds

    def remaining(self, key: str) -> float:
        return self._store[key][1] - self.now

    def _live(self, key: str) -> Optional[Tuple[str, Optional[float]]]:
        entry = self._store.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if expires_at is not None and expires_at <= self.now:
            del self._store[key]
            return None
        return entry

    async def get(self, key):
        entry = self._live(key)
        return entry[0] if entry else None

    async def set(self, key, value, ttl_seconds=None):
        self._store[key] = (str(value), self.now + ttl_seconds if ttl_seconds else None)

    async def delete(self, key):
        self._store.pop(key, None)

    async def exists(self, key):
        return self._live(key) is not None

    async def incr(self, key):
        entry = self._live(key)
        value = int(entry[0]) + 1 if entry else 1
        self._store[key] = (str(value), entry[1] if entry else None)
        return value

    async def expire(self, key, ttl_seconds):
        entry = self._live(key)
        if entry:
            self._store[key] = (entry[0], self.now + ttl_seconds)

    async def ttl(self, key):
        entry = self._live(key)
        if entry is None:
            return -2
        if entry[1] is None:
            return -1
        return int(entry[1] - self.now)


@pytest.fixture(autouse=True)
def database():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def cache():
    return FakeCacheClient()


@pytest.fixture
def client(cache):
    app.dependency_overrides[get_cache_client] = lambda: cache
    yield TestClient(app)
    app.dependency_overrides.clear()


def count_rows(model) -> int:
    session = SessionLocal()
    try:
        return session.query(model).count()
    finally:
        session.close()


def set_role(email: str, role: UserRole) -> None:
    session = SessionLocal()
    try:
        session.query(UserModel).filter(UserModel.email == email).update({UserModel.role: role})
        session.commit()
    finally:
        session.close()


def create_user(session, email: str, phone: str, role: UserRole = UserRole.USER) -> UserModel:
    user = UserModel(
        email=email,
        phone=phone,
        hashed_password=get_password_hash(PASSWORD),
        full_name="Seeded User",
        role=role,
    )
    session.add(user)
    session.flush()
    return user


@pytest.fixture
def menu():
    """Two restaurants; the first has a burger with cheese and bacon add-ons"""
    session = SessionLocal()
    try:
        owner = create_user(session, "owner@example.com", "+201000000001", UserRole.RESTAURANT_OWNER)

        grill = RestaurantModel(
            owner_id=owner.id,
            name="Cairo Grill",
            slug="cairo-grill",
            delivery_fee=Decimal("15.00"),
            min_order_amount=Decimal("50.00"),
            avg_delivery_time=35,
        )
        other = RestaurantModel(
            name="Nile Sushi",
            slug="nile-sushi",
            delivery_fee=Decimal("20.00"),
            min_order_amount=Decimal("0"),
        )
        session.add_all([grill, other])
        session.flush()

        burger = MenuItemModel(restaurant_id=grill.id, name="Classic Burger", price=Decimal("40.00"))
        fries = MenuItemModel(restaurant_id=grill.id, name="Fries", price=Decimal("12.50"))
        soldout = MenuItemModel(restaurant_id=grill.id, name="Seasonal Wrap", price=Decimal("30.00"), is_available=False)
        maki = MenuItemModel(restaurant_id=other.id, name="Salmon Maki", price=Decimal("55.00"))
        session.add_all([burger, fries, soldout, maki])
        session.flush()

        extras = AddOnGroupModel(menu_item_id=burger.id, name="Extras", max_selections=3)
        session.add(extras)
        session.flush()

        cheese = AddOnOptionModel(group_id=extras.id, name="Cheese", price=Decimal("5.00"))
        bacon = AddOnOptionModel(group_id=extras.id, name="Bacon", price=Decimal("7.25"))
        session.add_all([cheese, bacon])
        session.flush()

        ids = {
            "owner_id": str(owner.id),
            "restaurant_id": str(grill.id),
            "other_restaurant_id": str(other.id),
            "burger": str(burger.id),
            "fries": str(fries.id),
            "soldout": str(soldout.id),
            "maki": str(maki.id),
            "cheese": str(cheese.id),
            "bacon": str(bacon.id),
        }
        session.commit()
        return ids
    finally:
        session.close()


def signup(client, email="amira@example.com", phone="+201234567890", password=PASSWORD):
    response = client.post(f"{API}/auth/signup", json={
        "email": email,
        "phone": phone,
        "password": password,
        "full_name": "Amira Hassan",
    })
    assert response.status_code == 201, response.text
    return response.json()["data"]


def login(client, email_or_phone, password=PASSWORD):
    response = client.post(f"{API}/auth/login", json={"email_or_phone": email_or_phone, "password": password})
    assert response.status_code == 200, response.text
    return response.json()["data"]


def bearer(token: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_headers(client):
    data = signup(client)
    return bearer(data["tokens"]["access_token"])


def add_location(client, headers, **overrides):
    body = {"label": "Home", "address": "12 Tahrir St", "building": "B4", "floor": "3", "apartment": "12"}
    body.update(overrides)
    response = client.post(f"{API}/locations", json=body, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["data"]


def add_card(client, headers, card_number="4111111111111111", **overrides):
    body = {"card_number": card_number, "expiry_month": 12, "expiry_year": 2030, "cvv": "123"}
    body.update(overrides)
    response = client.post(f"{API}/payment-methods", json=body, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["data"]


def add_to_cart(client, headers, menu_item_id, quantity=1, add_ons=None):
    body = {"menu_item_id": menu_item_id, "quantity": quantity, "add_ons": add_ons or []}
    response = client.post(f"{API}/cart/items", json=body, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["data"]


def checkout(client, headers, location_id, payment_method_id, **extra):
    body = {"payment_method_id": payment_method_id, "delivery_location_id": location_id}
    body.update(extra)
    return client.post(f"{API}/orders/checkout", json=body, headers=headers)
