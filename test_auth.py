"""
Admin login and token checks
"""

from datetime import datetime, timedelta, timezone

import jwt

from app.security import create_access_token, hash_password, verify_password

JWT_SECRET = "test-secret"


def test_login_returns_token_for_admins_shop(client, admins):
    response = client.post("/api/admin/login", json={"email": "a@example.com", "password": "secret-a"})
    assert response.status_code == 200
    body = response.json()
    assert body["shop_id"] == "shop-a"

    claims = jwt.decode(body["token"], JWT_SECRET, algorithms=["HS256"])
    assert claims["shop_id"] == "shop-a"
    assert claims["role"] == "admin"
    assert claims["exp"] - claims["iat"] == 7 * 24 * 3600


def test_wrong_password_and_unknown_email_look_the_same(client, admins):
    wrong_password = client.post("/api/admin/login", json={"email": "a@example.com", "password": "nope"})
    unknown_email = client.post("/api/admin/login", json={"email": "ghost@example.com", "password": "secret-a"})

    assert wrong_password.status_code == 401
    assert unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json() == {"detail": "Unauthorized"}


def test_login_missing_field_is_validation_error(client, admins):
    response = client.post("/api/admin/login", json={"email": "a@example.com"})
    assert response.status_code == 400
    assert response.json() == {"detail": "password required"}


def test_there_is_no_signup_route(client):
    response = client.post("/api/admin/signup", json={"email": "new@example.com", "password": "x", "shop_id": "shop-a"})
    assert response.status_code in (404, 405)


def test_missing_token_is_rejected(client, admins):
    response = client.delete("/api/admin/product/anything")
    assert response.status_code == 401
    assert response.json() == {"detail": "Unauthorized"}


def test_bearer_prefix_is_accepted(client, token_a, make_images):
    response = client.post(
        "/api/admin/product",
        data={"category": "Lamps"},
        files=make_images(1),
        headers={"Authorization": f"Bearer {token_a}"},
    )
    assert response.status_code == 200
    assert response.json()["status"] == "created"


def test_bad_tokens_are_rejected(client, settings, admins):
    forged = jwt.encode(
        {"shop_id": "shop-a", "role": "admin", "exp": datetime.now(timezone.utc) + timedelta(days=1)},
        "some-other-secret",
        algorithm="HS256",
    )
    for token in ("garbage", forged):
        response = client.put(
            "/api/admin/product/anything",
            json={"category": "x"},
            headers={"Authorization": token},
        )
        assert response.status_code == 401
        assert response.json() == {"detail": "Unauthorized"}


def test_token_older_than_seven_days_is_rejected_everywhere(client, settings, admins, make_images):
    stale = create_access_token(
        "shop-a", "admin", settings,
        issued_at=datetime.now(timezone.utc) - timedelta(days=7, minutes=1),
    )
    headers = {"Authorization": stale}

    responses = [
        client.post("/api/admin/product", data={"category": "Chairs"}, files=make_images(1), headers=headers),
        client.put("/api/admin/product/some-id", json={"category": "Chairs"}, headers=headers),
        client.delete("/api/admin/product/some-id", headers=headers),
    ]
    for response in responses:
        assert response.status_code == 401
        assert response.json() == {"detail": "Unauthorized"}


def test_password_hashing():
    hashed = hash_password("hunter2")
    assert hashed != "hunter2"
    assert verify_password("hunter2", hashed)
    assert not verify_password("hunter3", hashed)
    # plaintext left in the password column never matches
    assert not verify_password("hunter2", "hunter2")
