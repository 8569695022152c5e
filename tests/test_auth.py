"""Signup, login, phone verification, token rotation and logout"""

from biteback.core.config import settings
from biteback.db.database import SessionLocal
from biteback.infrastructure.orm import RefreshTokenModel, UserModel

from conftest import API, PASSWORD, bearer, count_rows, login, signup


def _wrong_code(code: str) -> str:
    return "000000" if code != "000000" else "111111"


def test_signup_returns_user_tokens_and_dev_otp(client):
    data = signup(client, email="Amira@Example.com")

    assert data["user"]["email"] == "amira@example.com"
    assert data["user"]["role"] == "USER"
    assert data["user"]["is_phone_verified"] is False
    assert data["tokens"]["token_type"] == "bearer"
    assert data["tokens"]["access_token"] != data["tokens"]["refresh_token"]
    assert len(data["dev_otp"]) == 6 and data["dev_otp"].isdigit()
    assert count_rows(RefreshTokenModel) == 1


def test_signup_response_envelope(client):
    response = client.post(f"{API}/auth/signup", json={
        "email": "envelope@example.com",
        "phone": "+201111111111",
        "password": PASSWORD,
        "full_name": "Envelope Test",
    }, headers={"X-Request-ID": "req-42"})

    body = response.json()
    assert body["success"] is True
    assert body["meta"]["path"] == "/api/v1/auth/signup"
    assert body["meta"]["request_id"] == "req-42"
    assert response.headers["X-Request-ID"] == "req-42"


def test_duplicate_email_or_phone_conflicts(client):
    signup(client)

    same_email = client.post(f"{API}/auth/signup", json={
        "email": "AMIRA@example.com",
        "phone": "+201299999999",
        "password": PASSWORD,
        "full_name": "Someone Else",
    })
    same_phone = client.post(f"{API}/auth/signup", json={
        "email": "other@example.com",
        "phone": "+201234567890",
        "password": PASSWORD,
        "full_name": "Someone Else",
    })

    for response in (same_email, same_phone):
        assert response.status_code == 409
        assert response.json()["success"] is False
        assert response.json()["error"]["code"] == "CONFLICT"
    assert count_rows(UserModel) == 1


def test_signup_rejects_weak_password(client):
    response = client.post(f"{API}/auth/signup", json={
        "email": "weak@example.com",
        "phone": "+201234567890",
        "password": "password",
        "full_name": "Weak Password",
    })

    assert response.status_code == 422
    error = response.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["details"][0]["field"] == "password"


def test_login_with_email_or_phone(client):
    signup(client)

    by_email = login(client, "AMIRA@example.com")
    by_phone = login(client, "+201234567890")

    assert by_email["user"]["email"] == "amira@example.com"
    assert by_phone["user"]["phone"] == "+201234567890"
    # Logging in again keeps earlier sessions alive
    assert count_rows(RefreshTokenModel) == 3


def test_login_failures_are_indistinguishable(client):
    signup(client)

    unknown = client.post(f"{API}/auth/login", json={"email_or_phone": "ghost@example.com", "password": PASSWORD})
    wrong = client.post(f"{API}/auth/login", json={"email_or_phone": "amira@example.com", "password": "Wrong123!"})

    assert unknown.status_code == wrong.status_code == 401
    assert unknown.json()["error"] == wrong.json()["error"]
    assert wrong.json()["error"]["message"] == "Invalid credentials"


def test_login_is_rate_limited_per_client(client, cache):
    body = {"email_or_phone": "ghost@example.com", "password": PASSWORD}
    for _ in range(5):
        assert client.post(f"{API}/auth/login", json=body).status_code == 401

    limited = client.post(f"{API}/auth/login", json=body)
    assert limited.status_code == 429
    assert limited.json()["error"]["code"] == "TOO_MANY_REQUESTS"

    cache.advance(61)
    assert client.post(f"{API}/auth/login", json=body).status_code == 401


def test_rate_limit_counter_without_expiry_recovers(client, cache):
    # A counter whose expiry was never set, e.g. after a crash between incr and expire
    cache._store["rate_limit:login:testclient"] = ("5", None)
    body = {"email_or_phone": "ghost@example.com", "password": PASSWORD}

    assert client.post(f"{API}/auth/login", json=body).status_code == 429
    assert 0 < cache.remaining("rate_limit:login:testclient") <= 60

    cache.advance(61)
    assert client.post(f"{API}/auth/login", json=body).status_code == 401


def test_protected_endpoint_requires_bearer_token(client):
    missing = client.get(f"{API}/profile")
    garbage = client.get(f"{API}/profile", headers=bearer("not-a-jwt"))

    assert missing.status_code == 401
    assert missing.json()["error"]["code"] == "UNAUTHORIZED"
    assert garbage.status_code == 401


def test_refresh_token_is_not_an_access_token(client):
    data = signup(client)

    response = client.get(f"{API}/profile", headers=bearer(data["tokens"]["refresh_token"]))

    assert response.status_code == 401


def test_verify_phone_locks_after_max_attempts_until_resend(client, cache):
    data = signup(client, phone="+201234567890")
    headers = bearer(data["tokens"]["access_token"])
    code = data["dev_otp"]

    for _ in range(5):
        response = client.post(f"{API}/auth/verify-phone", json={"code": _wrong_code(code)}, headers=headers)
        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Invalid OTP"

    locked = client.post(f"{API}/auth/verify-phone", json={"code": code}, headers=headers)
    assert locked.status_code == 400
    assert "Too many failed attempts" in locked.json()["error"]["message"]

    cache.advance(61)
    resent = client.post(f"{API}/auth/resend-otp", json={"email_or_phone": "+201234567890"})
    assert resent.status_code == 200
    new_code = resent.json()["data"]["dev_otp"]

    verified = client.post(f"{API}/auth/verify-phone", json={"code": new_code}, headers=headers)
    assert verified.status_code == 200

    profile = client.get(f"{API}/profile", headers=headers).json()["data"]
    assert profile["is_phone_verified"] is True


def test_verify_phone_follows_configured_otp_length(client, monkeypatch):
    monkeypatch.setattr(settings, "OTP_LENGTH", 4)
    data = signup(client)
    headers = bearer(data["tokens"]["access_token"])
    assert len(data["dev_otp"]) == 4

    too_long = client.post(f"{API}/auth/verify-phone", json={"code": data["dev_otp"] + "00"}, headers=headers)
    assert too_long.status_code == 422

    verified = client.post(f"{API}/auth/verify-phone", json={"code": data["dev_otp"]}, headers=headers)
    assert verified.status_code == 200


def test_verify_phone_reports_remaining_attempts(client):
    data = signup(client)
    headers = bearer(data["tokens"]["access_token"])

    response = client.post(f"{API}/auth/verify-phone", json={"code": _wrong_code(data["dev_otp"])}, headers=headers)

    assert response.json()["error"]["details"] == {"remaining_attempts": 4}


def test_verify_phone_with_expired_otp(client, cache):
    data = signup(client)
    headers = bearer(data["tokens"]["access_token"])

    cache.advance(5 * 60 + 1)
    response = client.post(f"{API}/auth/verify-phone", json={"code": data["dev_otp"]}, headers=headers)

    assert response.status_code == 400
    assert "expired" in response.json()["error"]["message"]


def test_verified_otp_cannot_be_reused(client):
    data = signup(client)
    headers = bearer(data["tokens"]["access_token"])

    first = client.post(f"{API}/auth/verify-phone", json={"code": data["dev_otp"]}, headers=headers)
    second = client.post(f"{API}/auth/verify-phone", json={"code": data["dev_otp"]}, headers=headers)

    assert first.status_code == 200
    assert second.status_code == 400


def test_resend_otp_respects_cooldown(client, cache):
    signup(client)

    early = client.post(f"{API}/auth/resend-otp", json={"email_or_phone": "amira@example.com"})
    assert early.status_code == 400
    assert early.json()["error"]["details"]["retry_after"] == 60

    cache.advance(30)
    later = client.post(f"{API}/auth/resend-otp", json={"email_or_phone": "amira@example.com"})
    assert later.json()["error"]["details"]["retry_after"] == 30


def test_resend_otp_unknown_user(client):
    response = client.post(f"{API}/auth/resend-otp", json={"email_or_phone": "+209999999999"})

    assert response.status_code == 404


def test_refresh_rotation_is_single_use(client):
    data = signup(client)
    old_refresh = data["tokens"]["refresh_token"]

    first = client.post(f"{API}/auth/refresh", json={"refresh_token": old_refresh})
    second = client.post(f"{API}/auth/refresh", json={"refresh_token": old_refresh})

    assert first.status_code == 200
    new_tokens = first.json()["data"]
    assert new_tokens["refresh_token"] != old_refresh
    assert second.status_code == 401
    assert second.json()["error"]["message"] == "Invalid or expired refresh token"

    # The replacement keeps working
    third = client.post(f"{API}/auth/refresh", json={"refresh_token": new_tokens["refresh_token"]})
    assert third.status_code == 200


def test_refresh_records_replacement_link(client):
    data = signup(client)
    old_refresh = data["tokens"]["refresh_token"]
    new_refresh = client.post(f"{API}/auth/refresh", json={"refresh_token": old_refresh}).json()["data"]["refresh_token"]

    session = SessionLocal()
    try:
        row = session.query(RefreshTokenModel).filter(RefreshTokenModel.token == old_refresh).one()
        assert row.revoked_at is not None
        assert row.replaced_by_token == new_refresh
    finally:
        session.close()


def test_access_token_cannot_refresh(client):
    data = signup(client)

    response = client.post(f"{API}/auth/refresh", json={"refresh_token": data["tokens"]["access_token"]})

    assert response.status_code == 401
    assert response.json()["error"]["message"] == "Invalid or expired refresh token"


def test_logout_blacklists_access_token_and_revokes_refresh_tokens(client, cache):
    data = signup(client)
    other_session = login(client, "amira@example.com")
    headers = bearer(data["tokens"]["access_token"])

    response = client.post(f"{API}/auth/logout", headers=headers)
    assert response.status_code == 200

    rejected = client.get(f"{API}/profile", headers=headers)
    assert rejected.status_code == 401
    assert rejected.json()["error"]["message"] == "Token has been revoked"

    for refresh in (data["tokens"]["refresh_token"], other_session["tokens"]["refresh_token"]):
        assert client.post(f"{API}/auth/refresh", json={"refresh_token": refresh}).status_code == 401

    blacklisted = [key for key in cache._store if key.startswith("blacklist:")]
    assert len(blacklisted) == 1
    assert 0 < cache.remaining(blacklisted[0]) <= 15 * 60


def test_forgot_password_is_generic_for_unknown_email(client):
    signup(client)

    known = client.post(f"{API}/auth/forgot-password", json={"email": "amira@example.com"})
    unknown = client.post(f"{API}/auth/forgot-password", json={"email": "nobody@example.com"})

    assert known.status_code == unknown.status_code == 200
    assert known.json()["data"]["message"] == unknown.json()["data"]["message"]
    assert unknown.json()["data"]["reset_token"] is None


def test_reset_password_revokes_sessions_and_consumes_token(client):
    data = signup(client)
    token = client.post(f"{API}/auth/forgot-password", json={"email": "amira@example.com"}).json()["data"]["reset_token"]

    reset = client.post(f"{API}/auth/reset-password", json={"token": token, "new_password": "Fresh456$"})
    assert reset.status_code == 200

    assert client.post(f"{API}/auth/refresh", json={"refresh_token": data["tokens"]["refresh_token"]}).status_code == 401
    assert client.post(f"{API}/auth/login", json={"email_or_phone": "amira@example.com", "password": PASSWORD}).status_code == 401
    assert login(client, "amira@example.com", password="Fresh456$")["user"]["email"] == "amira@example.com"

    reused = client.post(f"{API}/auth/reset-password", json={"token": token, "new_password": "Other789!"})
    assert reused.status_code == 400
    assert reused.json()["error"]["message"] == "Invalid or expired reset token"


def test_new_reset_token_invalidates_previous(client):
    signup(client)
    first = client.post(f"{API}/auth/forgot-password", json={"email": "amira@example.com"}).json()["data"]["reset_token"]
    second = client.post(f"{API}/auth/forgot-password", json={"email": "amira@example.com"}).json()["data"]["reset_token"]

    stale = client.post(f"{API}/auth/reset-password", json={"token": first, "new_password": "Fresh456$"})
    fresh = client.post(f"{API}/auth/reset-password", json={"token": second, "new_password": "Fresh456$"})

    assert stale.status_code == 400
    assert fresh.status_code == 200
