"""Profile edits, password change and notification preferences"""

from conftest import API, PASSWORD, bearer, login, signup


def test_get_profile(client, user_headers):
    profile = client.get(f"{API}/profile", headers=user_headers).json()["data"]

    assert profile["email"] == "amira@example.com"
    assert profile["phone"] == "+201234567890"
    assert profile["full_name"] == "Amira Hassan"
    assert "hashed_password" not in profile


def test_changing_phone_requires_new_verification(client):
    data = signup(client)
    headers = bearer(data["tokens"]["access_token"])
    client.post(f"{API}/auth/verify-phone", json={"code": data["dev_otp"]}, headers=headers)

    updated = client.patch(
        f"{API}/profile",
        json={"full_name": "Amira H.", "phone": "+201098765432"},
        headers=headers,
    ).json()["data"]

    assert updated["full_name"] == "Amira H."
    assert updated["phone"] == "+201098765432"
    assert updated["is_phone_verified"] is False


def test_profile_email_must_stay_unique(client, user_headers):
    signup(client, email="omar@example.com", phone="+201555555555")

    response = client.patch(f"{API}/profile", json={"email": "Omar@example.com"}, headers=user_headers)

    assert response.status_code == 409
    assert response.json()["error"]["message"] == "Email already in use"


def test_keeping_own_email_is_not_a_conflict(client, user_headers):
    response = client.patch(f"{API}/profile", json={"email": "amira@example.com"}, headers=user_headers)

    assert response.status_code == 200


def test_change_password(client, user_headers):
    wrong = client.post(
        f"{API}/profile/change-password",
        json={"current_password": "Nope123!", "new_password": "Fresh456$"},
        headers=user_headers,
    )
    assert wrong.status_code == 400

    changed = client.post(
        f"{API}/profile/change-password",
        json={"current_password": PASSWORD, "new_password": "Fresh456$"},
        headers=user_headers,
    )
    assert changed.status_code == 200
    assert login(client, "amira@example.com", password="Fresh456$")["user"]["email"] == "amira@example.com"


def test_signup_creates_default_notification_settings(client, user_headers):
    settings = client.get(f"{API}/settings/notifications", headers=user_headers).json()["data"]

    assert settings == {
        "push_notifications": True,
        "sms_notifications": True,
        "promotional_emails": False,
        "order_updates": True,
    }


def test_partial_notification_update(client, user_headers):
    response = client.patch(
        f"{API}/settings/notifications",
        json={"promotional_emails": True, "sms_notifications": False},
        headers=user_headers,
    )

    assert response.status_code == 200
    assert response.json()["data"] == {
        "push_notifications": True,
        "sms_notifications": False,
        "promotional_emails": True,
        "order_updates": True,
    }
    assert client.get(f"{API}/settings/notifications", headers=user_headers).json()["data"] == response.json()["data"]
