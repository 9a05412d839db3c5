"""Shopping list API tests."""

from inventory.identifiers import new_id


def regenerate(client) -> list[dict]:
    response = client.post("/api/v1/shopping-list/regenerate")
    assert response.status_code == 200, response.text
    return response.json()


def test_regenerate_empty_pantry(client, create_product):
    """Products with no stock need their whole threshold."""
    product = create_product("Eggs", threshold=3)

    entries = regenerate(client)

    assert len(entries) == 1
    assert entries[0]["product_id"] == product["id"]
    assert entries[0]["name"] == "Eggs"
    assert entries[0]["quantity"] == 3


def test_regenerate_fully_stocked(client, create_product, stock_product):
    product = create_product("Eggs", threshold=3)
    stock_product(product["id"], 3)

    assert regenerate(client) == []
    assert client.get("/api/v1/shopping-list").json() == []


def test_regenerate_partial_stock(client, create_product, stock_product):
    product = create_product("Eggs", threshold=2)
    stock_product(product["id"], 1)

    entries = regenerate(client)

    assert [(e["product_id"], e["quantity"]) for e in entries] == [(product["id"], 1)]


def test_regenerate_replaces_manual_entries(client, create_product):
    """Regeneration is a full replace: manual entries disappear."""
    product = create_product("Eggs", threshold=1)
    manual = client.post(
        "/api/v1/shopping-list",
        json={"product_id": new_id(), "name": "Birthday candles", "quantity": 1},
    ).json()

    regenerate(client)

    entries = client.get("/api/v1/shopping-list").json()
    assert [e["product_id"] for e in entries] == [product["id"]]
    assert client.get(f"/api/v1/shopping-list/{manual['id']}").status_code == 404


def test_regenerate_twice_is_stable(client, create_product, stock_product):
    milk = create_product("Milk", threshold=2)
    create_product("Bread", threshold=1)
    stock_product(milk["id"], 1)

    def snapshot():
        entries = client.get("/api/v1/shopping-list").json()
        return sorted((e["product_id"], e["name"], e["quantity"]) for e in entries)

    regenerate(client)
    first = snapshot()
    regenerate(client)
    second = snapshot()

    assert first == second
    assert len(first) == 2


def test_regenerate_skips_zero_threshold(client, create_product):
    product = create_product("Saffron", threshold=1)
    client.put(
        f"/api/v1/products/{product['id']}",
        json={"name": "Saffron", "category": "spices", "store": "Other", "threshold": 0},
    )

    assert regenerate(client) == []


def test_list_sorted_by_name(client, create_product):
    create_product("Zucchini", threshold=1)
    create_product("Apples", threshold=1)
    regenerate(client)

    entries = client.get("/api/v1/shopping-list").json()
    assert [e["name"] for e in entries] == ["Apples", "Zucchini"]


def test_add_entry(client):
    """Test manually adding a shopping list entry."""
    product_id = new_id()
    response = client.post(
        "/api/v1/shopping-list",
        json={"product_id": product_id, "name": "Coffee", "quantity": 2},
    )
    assert response.status_code == 201
    data = response.json()
    assert data["product_id"] == product_id
    assert data["quantity"] == 2

    response = client.get(f"/api/v1/shopping-list/{data['id']}")
    assert response.status_code == 200
    assert response.json()["name"] == "Coffee"


def test_add_entry_rejects_non_positive_quantity(client):
    response = client.post(
        "/api/v1/shopping-list",
        json={"product_id": new_id(), "name": "Coffee", "quantity": 0},
    )
    assert response.status_code == 400
    assert "greater than zero" in response.json()["detail"]


def test_add_entry_rejects_oversized_quantity(client):
    for quantity in (1_000_001, 10**19):
        response = client.post(
            "/api/v1/shopping-list",
            json={"product_id": new_id(), "name": "Coffee", "quantity": quantity},
        )
        assert response.status_code == 400
        assert "at most" in response.json()["detail"]

    assert client.get("/api/v1/shopping-list").json() == []


def test_add_entry_rejects_empty_name(client):
    response = client.post(
        "/api/v1/shopping-list",
        json={"product_id": new_id(), "name": "", "quantity": 1},
    )
    assert response.status_code == 400


def test_get_entry_invalid_id(client):
    response = client.get("/api/v1/shopping-list/xyz")
    assert response.status_code == 400


def test_delete_entry(client):
    entry = client.post(
        "/api/v1/shopping-list",
        json={"product_id": new_id(), "name": "Coffee", "quantity": 1},
    ).json()

    response = client.delete(f"/api/v1/shopping-list/{entry['id']}")
    assert response.status_code == 204

    response = client.delete(f"/api/v1/shopping-list/{entry['id']}")
    assert response.status_code == 404
