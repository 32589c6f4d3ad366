"""End-to-end scenarios over the real SQLite stack."""

URL = "/api/v1/products"
CHARMANDER_JSON = {
    "title": "Charmander",
    "description": "It has a preference for hot things. When it rains, steam is said to spout from the tip of its tail.",
    "price": 1093.45,
}


def test_create_then_read_round_trip(sqlite_client):
    created = sqlite_client.post(URL, json=CHARMANDER_JSON)
    assert created.status_code == 201
    body = created.json()
    assert body["id"] > 0
    for key, value in CHARMANDER_JSON.items():
        assert body[key] == value

    fetched = sqlite_client.get(f"{URL}/{body['id']}")
    assert fetched.status_code == 200
    assert fetched.json() == body


def test_created_ids_are_unique(sqlite_client):
    ids = {sqlite_client.post(URL, json=CHARMANDER_JSON).json()["id"] for _ in range(3)}
    assert len(ids) == 3


def test_get_unknown_product_is_404(sqlite_client):
    assert sqlite_client.get(f"{URL}/999").status_code == 404


def test_get_non_numeric_id_is_400(sqlite_client):
    response = sqlite_client.get(f"{URL}/abc")
    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid product ID"


def test_delete_then_read_is_404(sqlite_client):
    product_id = sqlite_client.post(URL, json=CHARMANDER_JSON).json()["id"]
    assert sqlite_client.delete(f"{URL}/{product_id}").status_code == 204
    assert sqlite_client.get(f"{URL}/{product_id}").status_code == 404
    assert product_id not in [p["id"] for p in sqlite_client.get(URL).json()]
    assert sqlite_client.delete(f"{URL}/{product_id}").status_code == 204


def test_update_preserves_identity(sqlite_client):
    created = sqlite_client.post(URL, json=CHARMANDER_JSON).json()
    updated = sqlite_client.put(
        f"{URL}/{created['id']}", json={"description": "Now a Charmeleon."}
    )
    assert updated.status_code == 200
    body = updated.json()
    assert body["id"] == created["id"]
    assert body["created_at"] == created["created_at"]
    assert body["updated_at"] >= created["updated_at"]
    assert body["title"] == "Charmander"
    assert body["description"] == "Now a Charmeleon."
    assert body["price"] == 1093.45


def test_update_deleted_product_is_404(sqlite_client):
    product_id = sqlite_client.post(URL, json=CHARMANDER_JSON).json()["id"]
    sqlite_client.delete(f"{URL}/{product_id}")
    response = sqlite_client.put(f"{URL}/{product_id}", json={"title": "Ghost"})
    assert response.status_code == 404


def test_invalid_create_is_rejected_without_writing(sqlite_client):
    response = sqlite_client.post(URL, json={"title": "", "description": "", "price": 0})
    assert response.status_code == 422
    assert response.json()["detail"].split("\n") == [
        "Field validation for 'title' failed on the 'required' tag",
        "Field validation for 'description' failed on the 'required' tag",
        "Field validation for 'price' failed on the 'required' tag",
    ]
    assert sqlite_client.get(URL).json() == []
