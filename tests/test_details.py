"""Detail API tests."""

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 16

DETAIL_FORM = {
    "name": "Brake pad",
    "description": "Front axle, ceramic",
    "price": "49.99",
    "quantity": "12",
    "is_available": "true",
    "weight": "0.8",
}


def create_detail(client, auth_headers, files=None, **overrides):
    """Create a detail through the API and return its id."""
    response = client.post(
        "/api/details",
        headers=auth_headers,
        data={**DETAIL_FORM, **overrides},
        files=files,
    )
    assert response.status_code == 201, response.text
    return response.json()["id"]


def test_details_require_token(client):
    """Test that detail endpoints require authentication."""
    assert client.get("/api/details").status_code == 401
    assert client.delete("/api/details/1").status_code == 401


def test_create_detail(client, auth_headers):
    """Test creating a detail."""
    detail_id = create_detail(client, auth_headers)

    response = client.get(f"/api/details/{detail_id}", headers=auth_headers)
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Brake pad"
    assert data["description"] == "Front axle, ceramic"
    assert data["price"] == 49.99
    assert data["quantity"] == 12
    assert data["is_available"] is True
    assert data["weight"] == 0.8
    assert data["image_path"] is None


def test_create_detail_unavailable(client, auth_headers):
    """Test that is_available parses form booleans."""
    detail_id = create_detail(client, auth_headers, is_available="false")
    data = client.get(f"/api/details/{detail_id}", headers=auth_headers).json()
    assert data["is_available"] is False


def test_create_detail_defaults(client, auth_headers):
    """Test creating a detail with only the required fields."""
    response = client.post(
        "/api/details", headers=auth_headers, data={"name": "Oil filter", "price": "9.5"}
    )
    assert response.status_code == 201

    data = client.get(f"/api/details/{response.json()['id']}", headers=auth_headers).json()
    assert data["quantity"] == 0
    assert data["is_available"] is True
    assert data["description"] is None
    assert data["weight"] is None


def test_create_detail_missing_price(client, auth_headers):
    """Test that price is required."""
    response = client.post("/api/details", headers=auth_headers, data={"name": "Bolt"})
    assert response.status_code == 400
    assert response.json() == {"error": "price is required"}


def test_create_detail_negative_quantity(client, auth_headers):
    """Test that quantity cannot be negative."""
    response = client.post(
        "/api/details", headers=auth_headers, data={**DETAIL_FORM, "quantity": "-1"}
    )
    assert response.status_code == 400


def test_list_details(client, auth_headers):
    """Test listing details with pagination."""
    for number in range(3):
        create_detail(client, auth_headers, name=f"Part {number}")

    response = client.get("/api/details?page=2&limit=2", headers=auth_headers)
    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 3
    assert [detail["name"] for detail in data["details"]] == ["Part 2"]


def test_get_detail_not_found(client, auth_headers):
    """Test getting an unknown detail."""
    response = client.get("/api/details/999999", headers=auth_headers)
    assert response.status_code == 404
    assert response.json() == {"error": "Detail not found"}


def test_update_detail(client, auth_headers):
    """Test a partial update that keeps the stored image."""
    detail_id = create_detail(
        client, auth_headers, files={"image": ("pad.png", PNG_BYTES, "image/png")}
    )
    before = client.get(f"/api/details/{detail_id}", headers=auth_headers).json()

    response = client.put(
        f"/api/details/{detail_id}",
        headers=auth_headers,
        data={"quantity": "0", "is_available": "false"},
    )
    assert response.status_code == 200
    assert response.json() == {"message": "Detail updated"}

    after = client.get(f"/api/details/{detail_id}", headers=auth_headers).json()
    assert after["quantity"] == 0
    assert after["is_available"] is False
    assert after["name"] == "Brake pad"
    assert after["image_path"] == before["image_path"]


def test_delete_detail(client, auth_headers):
    """Test deleting a detail, twice."""
    detail_id = create_detail(client, auth_headers)

    for _ in range(2):
        response = client.delete(f"/api/details/{detail_id}", headers=auth_headers)
        assert response.status_code == 200

    response = client.get(f"/api/details/{detail_id}", headers=auth_headers)
    assert response.status_code == 404
