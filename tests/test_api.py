# tests/test_api.py


def test_list_products(client):
    r = client.get("/api/products")
    assert r.status_code == 200
    assert [p["id"] for p in r.json()] == [1, 2, 3]


def test_get_product(client):
    r = client.get("/api/products/3")
    assert r.status_code == 200
    assert r.json()["name"] == "Coffee Maker"


def test_get_missing_product(client):
    r = client.get("/api/products/404")
    assert r.status_code == 404
    assert r.json() == {"message": "Product not found"}


def test_non_integer_id_is_bad_request(client):
    r = client.get("/api/products/abc")
    assert r.status_code == 400
    assert "message" in r.json()


def test_create_product(client):
    r = client.post("/api/products", json={"name": "Pen", "price": 1.5, "category": "office"})
    assert r.status_code == 201
    body = r.json()
    assert body == {"id": 4, "name": "Pen", "description": "", "price": 1.5, "category": "office"}
    assert client.get("/api/products/4").json() == body


def test_create_invalid_product(client):
    r = client.post("/api/products", json={"name": "", "price": -5})
    assert r.status_code == 400
    body = r.json()
    fields = {e["field"] for e in body["errors"]}
    assert fields == {"name", "price", "category"}
    assert "Product name is required" in body["message"]


def test_create_with_malformed_body(client):
    r = client.post("/api/products", content=b"{oops", headers={"Content-Type": "application/json"})
    assert r.status_code == 400


def test_update_product(client):
    r = client.put("/api/products/1", json={"name": "Pen Pro", "price": 2.0, "category": "office"})
    assert r.status_code == 200
    assert r.json()["id"] == 1
    assert client.get("/api/products/1").json()["name"] == "Pen Pro"


def test_update_missing_product(client):
    r = client.put("/api/products/77", json={"name": "Pen", "price": 2.0, "category": "office"})
    assert r.status_code == 404


def test_update_invalid_product(client):
    r = client.put("/api/products/1", json={"name": "Pen", "price": 0, "category": "office"})
    assert r.status_code == 400


def test_delete_product(client):
    r = client.delete("/api/products/2")
    assert r.status_code == 204
    assert client.get("/api/products/2").status_code == 404
    assert [p["id"] for p in client.get("/api/products").json()] == [1, 3]


def test_delete_missing_product(client):
    assert client.delete("/api/products/2000").status_code == 404


def test_storage_failure_is_500_and_server_survives(client, store):
    store.path.write_text("garbage", encoding="utf-8")
    r = client.get("/api/products")
    assert r.status_code == 500
    assert r.json() == {"message": "Internal server error"}

    store.path.write_text('{"products": []}', encoding="utf-8")
    assert client.get("/api/products").json() == []


def test_unknown_api_path_returns_json(client):
    r = client.get("/api/nothing-here")
    assert r.status_code == 404
    assert "message" in r.json()


def test_create_with_boolean_price_is_bad_request(client):
    r = client.post("/api/products", json={"name": "Pen", "price": True, "category": "office"})
    assert r.status_code == 400
    assert r.json()["errors"][0]["field"] == "price"
    assert len(client.get("/api/products").json()) == 3


def test_update_with_boolean_price_is_bad_request(client):
    r = client.put("/api/products/1", json={"name": "Pen", "price": False, "category": "office"})
    assert r.status_code == 400
    assert client.get("/api/products/1").json()["price"] == 1299.99
