"""
Test the profile endpoints.
"""

from fastapi.testclient import TestClient


def test_get_profile(client: TestClient, auth_headers):
    response = client.get("/api/user/profile", headers=auth_headers())
    assert response.status_code == 200
    assert response.json() == {
        "id": 1,
        "email": "a@x.com",
        "first_name": "A",
        "last_name": "B",
        "mobile": None,
        "blood_group": None,
        "personal_notes": None,
    }


def test_profile_never_exposes_password(client: TestClient, auth_headers):
    data = client.get("/api/user/profile", headers=auth_headers()).json()
    assert "password" not in data
    assert "password_hash" not in data


def test_update_profile_round_trip(client: TestClient, auth_headers):
    """Test that updated fields change and unspecified ones stay."""
    headers = auth_headers()
    response = client.put(
        "/api/user/profile",
        headers=headers,
        json={"mobile": "555-0100", "bloodGroup": "AB-", "personalNotes": "asthma"},
    )
    assert response.status_code == 200
    assert response.json() == {"success": True}

    profile = client.get("/api/user/profile", headers=headers).json()
    assert profile["mobile"] == "555-0100"
    assert profile["blood_group"] == "AB-"
    assert profile["personal_notes"] == "asthma"
    assert profile["first_name"] == "A"
    assert profile["last_name"] == "B"


def test_update_profile_can_clear_a_field(client: TestClient, auth_headers):
    headers = auth_headers()
    client.put("/api/user/profile", headers=headers, json={"lastName": None})
    profile = client.get("/api/user/profile", headers=headers).json()
    assert profile["last_name"] is None
    assert profile["first_name"] == "A"


def test_profile_of_deleted_user_is_404(client: TestClient, settings):
    """A validly signed token for a user that does not exist."""
    from myhealth.services.token_service import TokenService

    token = TokenService(settings).issue(99, "ghost@x.com")
    response = client.get(
        "/api/user/profile", headers={"Authorization": f"Bearer {token}"}
    )
    assert response.status_code == 404
