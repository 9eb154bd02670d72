"""Tests for the identity endpoints and bearer token resolution."""
from datetime import timedelta

from app.core.security import create_access_token, decode_token


def test_register_login_and_me(client):
    registered = client.post(
        "/auth/register",
        json={"name": "Carol", "email": "carol@example.com", "password": "riddle-me-this"},
    )
    assert registered.status_code == 201

    login = client.post("/auth/login", json={"email": "carol@example.com", "password": "riddle-me-this"})
    assert login.status_code == 200
    token = login.json()["access_token"]

    me = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.json()["email"] == "carol@example.com"
    assert me.json()["id"] == registered.json()["user_id"]


def test_register_duplicate_email_conflicts(client, user_a):
    response = client.post(
        "/auth/register",
        json={"name": "Other", "email": user_a.email, "password": "pw"},
    )

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "CONFLICT"


def test_login_with_wrong_password(client):
    client.post("/auth/register", json={"name": "Dan", "email": "dan@example.com", "password": "right"})

    response = client.post("/auth/login", json={"email": "dan@example.com", "password": "wrong"})

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "UNAUTHORIZED"


def test_expired_token_is_rejected(client, user_a):
    token = create_access_token({"sub": user_a.id}, expires_delta=timedelta(minutes=-1))

    response = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401


def test_token_for_deleted_user_is_rejected(client):
    token = create_access_token({"sub": "no-such-user"})

    response = client.post("/riddles/list", json={}, headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
    assert response.json()["error"]["message"] == "User not found"


def test_token_round_trip_keeps_subject():
    assert decode_token(create_access_token({"sub": "abc"}))["sub"] == "abc"


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}
