"""
Test registration, login and bearer-token enforcement.
"""

from fastapi.testclient import TestClient


def test_register_returns_created_id(register_user):
    response = register_user()
    assert response.status_code == 201
    assert response.json() == {"id": 1}


def test_register_duplicate_email(register_user):
    """Test the duplicate-email message shown to the user."""
    assert register_user().status_code == 201
    response = register_user(password="different")
    assert response.status_code == 400
    assert "already exists" in response.json()["detail"]


def test_register_requires_email_and_password(client: TestClient):
    response = client.post("/api/auth/register", json={"email": "a@x.com"})
    assert response.status_code == 422


def test_login_returns_token_and_user(client: TestClient, register_user):
    register_user()
    response = client.post(
        "/api/auth/login", json={"email": "a@x.com", "password": "pw1"}
    )
    assert response.status_code == 200
    data = response.json()
    assert data["token"]
    assert data["user"] == {
        "id": 1,
        "email": "a@x.com",
        "firstName": "A",
        "lastName": "B",
    }


def test_login_failures_are_indistinguishable(client: TestClient, register_user):
    """Test that wrong password and unknown email look the same."""
    register_user()
    wrong_password = client.post(
        "/api/auth/login", json={"email": "a@x.com", "password": "nope"}
    )
    unknown_email = client.post(
        "/api/auth/login", json={"email": "b@x.com", "password": "pw1"}
    )
    assert wrong_password.status_code == unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json()


def test_missing_token_is_401(client: TestClient):
    assert client.get("/api/chat/sessions").status_code == 401


def test_wrong_scheme_is_401(client: TestClient):
    response = client.get("/api/chat/sessions", headers={"Authorization": "Basic abc"})
    assert response.status_code == 401


def test_invalid_token_is_403(client: TestClient, auth_headers):
    headers = auth_headers()
    tampered = {"Authorization": headers["Authorization"] + "tampered"}
    assert client.get("/api/chat/sessions", headers=tampered).status_code == 403

    garbage = {"Authorization": "Bearer not-a-token"}
    assert client.get("/api/user/profile", headers=garbage).status_code == 403
