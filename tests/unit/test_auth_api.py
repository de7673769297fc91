"""Tests for POST /api/authenticate."""

import jwt


def test_authenticate_returns_token_usable_on_entries(client, app, seed):
    resp = client.post("/api/authenticate", json={"username": "alice", "password": "alice-pass"})

    assert resp.status_code == 200
    token = resp.get_json()["id_token"]
    assert resp.headers["Authorization"] == f"Bearer {token}"
    payload = jwt.decode(token, app.config["SECRET_KEY"], algorithms=["HS256"])
    assert payload["sub"] == "alice"

    listing = client.get("/api/entries", headers={"Authorization": f"Bearer {token}"})
    assert listing.status_code == 200


def test_login_is_case_insensitive(client, seed):
    resp = client.post("/api/authenticate", json={"username": "ALICE", "password": "alice-pass"})
    assert resp.status_code == 200


def test_remember_me_issues_longer_token(client, app, seed):
    short = client.post("/api/authenticate", json={"username": "alice", "password": "alice-pass"})
    long = client.post(
        "/api/authenticate",
        json={"username": "alice", "password": "alice-pass", "rememberMe": True},
    )

    secret = app.config["SECRET_KEY"]
    short_exp = jwt.decode(short.get_json()["id_token"], secret, algorithms=["HS256"])["exp"]
    long_exp = jwt.decode(long.get_json()["id_token"], secret, algorithms=["HS256"])["exp"]
    assert long_exp - short_exp >= (
        app.config["TOKEN_VALIDITY_REMEMBER_ME_SEC"] - app.config["TOKEN_VALIDITY_SEC"] - 5
    )


def test_wrong_password_is_401(client, seed):
    resp = client.post("/api/authenticate", json={"username": "alice", "password": "nope"})

    assert resp.status_code == 401
    assert resp.get_json()["resultCode"] == "INVALID_CREDENTIALS"


def test_unknown_user_is_401(client, seed):
    resp = client.post("/api/authenticate", json={"username": "zed", "password": "whatever"})
    assert resp.status_code == 401


def test_deactivated_user_cannot_authenticate(client, seed):
    resp = client.post("/api/authenticate", json={"username": "carol", "password": "carol-pass"})
    assert resp.status_code == 401


def test_missing_fields_is_400(client, seed):
    resp = client.post("/api/authenticate", json={"username": "alice"})

    assert resp.status_code == 400
    assert resp.get_json()["resultCode"] == "MISSING_FIELDS"


def test_expired_token_is_rejected(client, app, seed):
    from blog.utils.jwt_helpers import encode_jwt_token

    with app.app_context():
        token = encode_jwt_token("alice", -10)

    resp = client.get("/api/entries", headers={"Authorization": f"Bearer {token}"})

    assert resp.status_code == 401
    assert resp.get_json()["resultCode"] == "INVALID_TOKEN"


def test_token_signed_with_other_secret_is_rejected(client, seed):
    token = jwt.encode({"sub": "alice"}, "some-other-secret-of-decent-length", algorithm="HS256")

    resp = client.get("/api/entries", headers={"Authorization": f"Bearer {token}"})

    assert resp.status_code == 401
