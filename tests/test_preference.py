"""Favorite team/country API tests."""

from src.models.preference import Preference


def test_get_preference_when_unset(client, auth_headers):
    """Test that a new user has no preference."""
    response = client.get("/api/preference", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() is None


def test_set_preference(client, auth_headers):
    """Test choosing a favorite team."""
    response = client.post(
        "/api/preference",
        headers=auth_headers,
        json={
            "team_id": "ECU",
            "team_name": "Ecuador",
            "team_logo": "https://flagcdn.com/w320/ec.png",
        },
    )
    assert response.status_code == 201
    data = response.json()
    assert data["team_id"] == "ECU"
    assert data["team_name"] == "Ecuador"

    response = client.get("/api/preference", headers=auth_headers)
    assert response.json()["team_name"] == "Ecuador"


def test_set_preference_twice_overwrites(client, db, auth_headers):
    """Test that the second choice replaces the first."""
    first = client.post(
        "/api/preference",
        headers=auth_headers,
        json={"team_id": "ECU", "team_name": "Ecuador", "team_logo": "https://flagcdn.com/w320/ec.png"},
    )
    second = client.post(
        "/api/preference",
        headers=auth_headers,
        json={"team_name": "LDU Quito", "team_logo": "https://example.com/ldu.svg"},
    )
    assert second.status_code == 201
    assert second.json()["id"] == first.json()["id"]
    assert second.json()["team_name"] == "LDU Quito"
    assert second.json()["team_id"] is None

    rows = db.query(Preference).filter(Preference.user_id == auth_headers.user_id).all()
    assert len(rows) == 1
    assert rows[0].team_name == "LDU Quito"


def test_set_preference_missing_fields(client, auth_headers):
    """Test that name and logo are required."""
    response = client.post("/api/preference", headers=auth_headers, json={"team_name": "Ecuador"})
    assert response.status_code == 400


def test_preference_is_scoped_to_user(client, auth_headers, other_auth_headers):
    """Test that one user's favorite is not visible to another."""
    client.post(
        "/api/preference",
        headers=auth_headers,
        json={"team_name": "Ecuador", "team_logo": "https://flagcdn.com/w320/ec.png"},
    )
    response = client.get("/api/preference", headers=other_auth_headers)
    assert response.json() is None


def test_set_preference_blank_fields(client, db, auth_headers):
    """Test that whitespace-only team name or logo is rejected."""
    for payload in (
        {"team_name": "  ", "team_logo": "https://flagcdn.com/w320/ec.png"},
        {"team_name": "Ecuador", "team_logo": "\t"},
    ):
        response = client.post("/api/preference", headers=auth_headers, json=payload)
        assert response.status_code == 400, payload
    assert db.query(Preference).count() == 0
