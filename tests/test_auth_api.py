"""Authentication API tests."""

import uuid

from jose import jwt


def test_health_check(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_register_user(client):
    """Test registration returns the user and a token for it."""
    response = client.post(
        "/api/v1/auth/register",
        json={
            "email": "a@x.com",
            "username": "alice",
            "display_name": "Alice",
            "password": "secret1",
        },
    )
    assert response.status_code == 201
    data = response.json()
    assert data["user"]["email"] == "a@x.com"
    assert data["user"]["username"] == "alice"
    assert data["user"]["display_name"] == "Alice"
    assert data["user"]["avatar_url"] is None
    assert "password" not in data["user"]
    claims = jwt.get_unverified_claims(data["token"])
    assert claims["user_id"] == data["user"]["id"]
    assert claims["email"] == "a@x.com"


def test_register_missing_fields(client):
    response = client.post(
        "/api/v1/auth/register",
        json={"email": "a@x.com", "username": "alice", "password": "secret1"},
    )
    assert response.status_code == 400
    assert response.json()["error"] == "All fields are required"


def test_register_short_password(client):
    response = client.post(
        "/api/v1/auth/register",
        json={
            "email": "a@x.com",
            "username": "alice",
            "display_name": "Alice",
            "password": "12345",
        },
    )
    assert response.status_code == 400
    assert response.json()["error"] == "Password must be at least 6 characters long"


def test_register_invalid_email(client):
    response = client.post(
        "/api/v1/auth/register",
        json={
            "email": "not-an-email",
            "username": "alice",
            "display_name": "Alice",
            "password": "secret1",
        },
    )
    assert response.status_code == 400
    assert response.json()["kind"] == "validation_error"


def test_register_duplicate_email(client, auth_headers):
    """Test a reused email conflicts even with a new username."""
    response = client.post(
        "/api/v1/auth/register",
        json={
            "email": "alice@example.com",
            "username": "alice2",
            "display_name": "Alice Again",
            "password": "secret1",
        },
    )
    assert response.status_code == 409
    assert response.json()["kind"] == "conflict"


def test_register_duplicate_username(client, auth_headers):
    """Test a reused username conflicts even with a new email."""
    response = client.post(
        "/api/v1/auth/register",
        json={
            "email": "another@example.com",
            "username": "alice",
            "display_name": "Other Alice",
            "password": "secret1",
        },
    )
    assert response.status_code == 409


def test_login(client, auth_headers):
    """Test login issues a token for a known email."""
    response = client.post(
        "/api/v1/auth/login", json={"email": "alice@example.com", "password": "secret1"}
    )
    assert response.status_code == 200
    data = response.json()
    assert data["user"]["id"] == auth_headers.user_id
    me = client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {data['token']}"})
    assert me.status_code == 200


def test_login_does_not_check_password(client, auth_headers):
    """Test the password is not verified on login."""
    response = client.post(
        "/api/v1/auth/login", json={"email": "alice@example.com", "password": "wrongpass"}
    )
    assert response.status_code == 200


def test_login_unknown_email(client):
    response = client.post(
        "/api/v1/auth/login", json={"email": "nobody@example.com", "password": "secret1"}
    )
    assert response.status_code == 401
    assert response.json()["error"] == "Invalid credentials"


def test_get_current_user(client, auth_headers):
    """Test getting current user info."""
    response = client.get("/api/v1/auth/me", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["username"] == "alice"


def test_me_requires_header(client):
    response = client.get("/api/v1/auth/me")
    assert response.status_code == 401
    assert response.json()["error"] == "Authorization header required"
    assert response.headers["www-authenticate"] == "Bearer"


def test_me_rejects_other_scheme(client):
    response = client.get("/api/v1/auth/me", headers={"Authorization": "Basic abc"})
    assert response.status_code == 401
    assert response.json()["error"] == "Invalid authorization header format"


def test_me_rejects_empty_token(client):
    response = client.get("/api/v1/auth/me", headers={"Authorization": "Bearer "})
    assert response.status_code == 401


def test_me_rejects_bad_token(client):
    response = client.get("/api/v1/auth/me", headers={"Authorization": "Bearer garbage"})
    assert response.status_code == 401
    assert response.json()["error"] == "Invalid token"


def test_me_for_deleted_user(client):
    """Test a valid token for a user that does not exist is a 404."""
    from src.services.auth import get_token_service

    token = get_token_service().issue(uuid.uuid4(), "ghost@example.com")
    response = client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 404
    assert response.json()["error"] == "User not found"


def test_update_profile(client, auth_headers):
    """Test updating display name and avatar."""
    response = client.put(
        "/api/v1/auth/me",
        headers=auth_headers,
        json={"display_name": "Alice B.", "avatar_url": "https://img.example.com/a.png"},
    )
    assert response.status_code == 200
    assert response.json()["display_name"] == "Alice B."
    assert response.json()["avatar_url"] == "https://img.example.com/a.png"


def test_update_profile_empty_display_name_keeps_current(client, auth_headers):
    response = client.put("/api/v1/auth/me", headers=auth_headers, json={"display_name": ""})
    assert response.status_code == 200
    assert response.json()["display_name"] == "Alice"
    assert response.json()["avatar_url"] is None


def test_update_profile_requires_auth(client):
    response = client.put("/api/v1/auth/me", json={"display_name": "Nobody"})
    assert response.status_code == 401


def test_two_users_get_distinct_tokens(client, register_user):
    first = register_user("one@example.com", "one")
    second = register_user("two@example.com", "two")
    assert first.user_id != second.user_id
    assert client.get("/api/v1/auth/me", headers=second).json()["username"] == "two"


def test_login_with_mixed_case_email_as_registered(client, register_user):
    """Test login accepts the exact email text used at registration."""
    registered = register_user("Alice@Example.COM", "mixedcase")
    response = client.post(
        "/api/v1/auth/login", json={"email": "Alice@Example.COM", "password": "secret1"}
    )
    assert response.status_code == 200
    assert response.json()["user"]["id"] == registered.user_id
