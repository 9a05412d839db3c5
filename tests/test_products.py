"""Product API tests."""

from inventory.identifiers import new_id


def test_create_product(client):
    """Test creating a product."""
    response = client.post(
        "/api/v1/products",
        json={
            "name": "Olive Oil",
            "brand": "Kirkland",
            "category": "baking supplies",
            "store": "Willies",
            "threshold": 2,
            "location": "Cupboard",
        },
    )
    assert response.status_code == 201
    data = response.json()
    assert len(data["id"]) == 32
    assert data["name"] == "Olive Oil"
    assert data["threshold"] == 2
    assert data["location"] == "Cupboard"
    assert data["notes"] == ""


def test_create_product_requires_positive_threshold(client):
    """Test that a new product needs a threshold above zero."""
    response = client.post(
        "/api/v1/products",
        json={"name": "Salt", "category": "spices", "store": "Willies", "threshold": 0},
    )
    assert response.status_code == 400
    assert "greater than zero" in response.json()["detail"]


def test_create_product_requires_name(client):
    """Test that blank names are rejected before anything is stored."""
    response = client.post(
        "/api/v1/products",
        json={"name": "   ", "category": "spices", "store": "Willies", "threshold": 1},
    )
    assert response.status_code == 400
    assert client.get("/api/v1/products").json() == []


def test_create_product_missing_fields(client):
    """Test that structurally invalid bodies are rejected."""
    response = client.post("/api/v1/products", json={"name": "Pepper"})
    assert response.status_code == 422


def test_get_product(client, create_product):
    """Test getting a specific product."""
    product = create_product("Pepper")

    response = client.get(f"/api/v1/products/{product['id']}")
    assert response.status_code == 200
    assert response.json()["name"] == "Pepper"


def test_get_product_invalid_id(client):
    """Test that malformed ids are a client error."""
    response = client.get("/api/v1/products/not-an-id")
    assert response.status_code == 400
    assert "legal id" in response.json()["detail"]


def test_get_product_not_found(client):
    """Test 404 for non-existent product."""
    response = client.get(f"/api/v1/products/{new_id()}")
    assert response.status_code == 404


def test_list_products_sorted_by_name(client, create_product):
    """Test default ascending name order."""
    create_product("Sugar")
    create_product("Flour")
    create_product("Baking Soda")

    response = client.get("/api/v1/products")
    assert response.status_code == 200
    assert [p["name"] for p in response.json()] == ["Baking Soda", "Flour", "Sugar"]


def test_list_products_descending(client, create_product):
    """Test sortorder=desc reverses the order."""
    create_product("Sugar")
    create_product("Flour")

    response = client.get("/api/v1/products", params={"sortorder": "desc"})
    assert [p["name"] for p in response.json()] == ["Sugar", "Flour"]


def test_list_products_unknown_sortorder_is_ascending(client, create_product):
    create_product("Sugar")
    create_product("Flour")

    response = client.get("/api/v1/products", params={"sortorder": "sideways"})
    assert [p["name"] for p in response.json()] == ["Flour", "Sugar"]


def test_list_products_sort_by_other_field(client, create_product):
    create_product("Sugar", threshold=5)
    create_product("Flour", threshold=1)
    create_product("Yeast", threshold=3)

    response = client.get("/api/v1/products", params={"sortby": "threshold", "sortorder": "desc"})
    assert [p["name"] for p in response.json()] == ["Sugar", "Yeast", "Flour"]


def test_list_products_invalid_sort_field(client):
    response = client.get("/api/v1/products", params={"sortby": "nonsense"})
    assert response.status_code == 400


def test_list_products_filters(client, create_product):
    """Test case-insensitive substring filters combined with AND."""
    create_product("Whole Milk", category="dairy", store="Willies")
    create_product("Oat Milk", category="beverages", store="Real Food Hub")
    create_product("Cheddar", category="dairy", store="Real Food Hub")

    response = client.get("/api/v1/products", params={"name": "milk"})
    assert [p["name"] for p in response.json()] == ["Oat Milk", "Whole Milk"]

    response = client.get("/api/v1/products", params={"category": "DAIRY", "store": "food"})
    assert [p["name"] for p in response.json()] == ["Cheddar"]


def test_list_products_accepts_product_name_keys(client, create_product):
    create_product("Whole Milk")
    create_product("Oat Milk")
    create_product("Cheddar")

    response = client.get(
        "/api/v1/products",
        params={"product_name": "milk", "sortby": "product_name", "sortorder": "desc"},
    )
    assert response.status_code == 200
    assert [p["name"] for p in response.json()] == ["Whole Milk", "Oat Milk"]


def test_update_product(client, create_product):
    """Test replacing a product's fields."""
    product = create_product("Cumin", threshold=2)

    response = client.put(
        f"/api/v1/products/{product['id']}",
        json={
            "name": "Ground Cumin",
            "category": "spices",
            "store": "Other",
            "threshold": 0,
            "notes": "Buy the big jar",
        },
    )
    assert response.status_code == 200
    data = response.json()
    assert data["id"] == product["id"]
    assert data["name"] == "Ground Cumin"
    assert data["threshold"] == 0
    assert data["notes"] == "Buy the big jar"


def test_update_product_negative_threshold(client, create_product):
    product = create_product("Cumin", threshold=2)

    response = client.put(
        f"/api/v1/products/{product['id']}",
        json={"name": "Cumin", "category": "spices", "store": "Other", "threshold": -1},
    )
    assert response.status_code == 400
    assert client.get(f"/api/v1/products/{product['id']}").json()["threshold"] == 2


def test_update_product_not_found(client):
    response = client.put(
        f"/api/v1/products/{new_id()}",
        json={"name": "Cumin", "category": "spices", "store": "Other", "threshold": 1},
    )
    assert response.status_code == 404


def test_delete_product(client, create_product):
    """Test deleting a product."""
    product = create_product("To Delete")

    response = client.delete(f"/api/v1/products/{product['id']}")
    assert response.status_code == 204

    response = client.get(f"/api/v1/products/{product['id']}")
    assert response.status_code == 404


def test_delete_product_not_found(client):
    response = client.delete(f"/api/v1/products/{new_id()}")
    assert response.status_code == 404
    assert "Was unable to delete" in response.json()["detail"]


def test_health_check(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
