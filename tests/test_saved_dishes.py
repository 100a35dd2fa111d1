"""Saved dish API tests."""

from datetime import UTC, datetime, timedelta

from src.models.saved_dish import SavedDish


def test_save_dish(client, auth_headers):
    """Test saving a dish."""
    response = client.post(
        "/api/saved-dishes",
        headers=auth_headers,
        json={
            "country": "Ecuador",
            "dish": "Encebollado",
            "image_url": "https://example.com/encebollado.jpg",
        },
    )
    assert response.status_code == 201
    data = response.json()
    assert data["created"] is True
    assert data["item"]["country"] == "Ecuador"
    assert data["item"]["dish"] == "Encebollado"
    assert data["item"]["image_url"] == "https://example.com/encebollado.jpg"


def test_save_dish_twice_is_idempotent(client, db, auth_headers):
    """Test that saving the same dish twice keeps one row."""
    payload = {"country": "Peru", "dish": "Ceviche"}
    first = client.post("/api/saved-dishes", headers=auth_headers, json=payload)
    second = client.post("/api/saved-dishes", headers=auth_headers, json=payload)

    assert first.status_code == 201
    assert second.status_code == 200
    assert second.json()["created"] is False
    assert second.json()["item"]["id"] == first.json()["item"]["id"]
    assert db.query(SavedDish).filter(SavedDish.user_id == auth_headers.user_id).count() == 1


def test_same_dish_in_two_countries(client, auth_headers):
    """Test that the same dish name under another country is a new row."""
    client.post("/api/saved-dishes", headers=auth_headers, json={"country": "Peru", "dish": "Ceviche"})
    response = client.post(
        "/api/saved-dishes", headers=auth_headers, json={"country": "Ecuador", "dish": "Ceviche"}
    )
    assert response.status_code == 201


def test_save_dish_missing_fields(client, auth_headers):
    """Test that country and dish are required."""
    response = client.post("/api/saved-dishes", headers=auth_headers, json={"country": "Peru"})
    assert response.status_code == 400

    response = client.post("/api/saved-dishes", headers=auth_headers, json={"dish": "Ceviche"})
    assert response.status_code == 400


def test_list_saved_dishes_newest_first(client, db, auth_headers):
    """Test that saved dishes are listed by recency."""
    now = datetime.now(UTC)
    db.add_all(
        [
            SavedDish(
                user_id=auth_headers.user_id,
                country="Mexico",
                dish="Tacos",
                created_at=now - timedelta(days=2),
            ),
            SavedDish(
                user_id=auth_headers.user_id,
                country="Italy",
                dish="Lasagna",
                created_at=now,
            ),
            SavedDish(
                user_id=auth_headers.user_id,
                country="Japan",
                dish="Ramen",
                created_at=now - timedelta(days=1),
            ),
        ]
    )
    db.commit()

    response = client.get("/api/saved-dishes", headers=auth_headers)
    assert response.status_code == 200
    assert [dish["dish"] for dish in response.json()] == ["Lasagna", "Ramen", "Tacos"]


def test_delete_saved_dish(client, auth_headers, other_auth_headers):
    """Test that only the owner can delete a saved dish."""
    dish_id = client.post(
        "/api/saved-dishes", headers=auth_headers, json={"country": "Peru", "dish": "Ceviche"}
    ).json()["item"]["id"]

    response = client.delete(f"/api/saved-dishes/{dish_id}", headers=other_auth_headers)
    assert response.status_code == 404

    response = client.delete(f"/api/saved-dishes/{dish_id}", headers=auth_headers)
    assert response.status_code == 200
    assert client.get("/api/saved-dishes", headers=auth_headers).json() == []


def test_save_dish_blank_fields(client, auth_headers):
    """Test that whitespace-only country or dish is rejected."""
    response = client.post(
        "/api/saved-dishes", headers=auth_headers, json={"country": " ", "dish": "Ceviche"}
    )
    assert response.status_code == 400
