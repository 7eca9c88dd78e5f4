import pytest


def test_create_brand_trims_name_and_returns_envelope(client) -> None:
    response = client.post("/api/brands", json={"name": "  Honda  ", "ignored": "value"})

    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["data"]["name"] == "Honda"
    assert body["data"]["id"] >= 1
    assert "createdAt" in body["data"]
    assert "updatedAt" in body["data"]
    assert "ignored" not in body["data"]


def test_create_brand_rejects_duplicate_name(client, brand) -> None:
    response = client.post("/api/brands", json={"name": "Toyota"})

    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "Brand already exists"
    assert body["statusCode"] == 400
    assert body["error"]["type"] == "ConflictError"


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"name": ""},
        {"name": "   "},
        {"name": "A"},
        {"name": 123},
        {"name": "x" * 101},
        {"name": "<script>alert('x')</script>"},
        {"name": "'; DROP TABLE brands; --"},
        {"name": "Тойота"},
        {"name": "../../etc/passwd"},
        {"name": "Ford\x00"},
    ],
)
def test_create_brand_rejects_invalid_names(client, payload: dict) -> None:
    response = client.post("/api/brands", json=payload)

    assert response.status_code == 400
    body = response.json()
    assert body["statusCode"] == 400
    assert body["message"]


def test_create_brand_rejects_malformed_json(client) -> None:
    response = client.post(
        "/api/brands",
        content=b'{"name": "Fiat"',
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400


def test_list_brands_paginates_sorted_by_name(client) -> None:
    names = [f"Brand {index:02d}" for index in range(12, 0, -1)]
    for name in names:
        assert client.post("/api/brands", json={"name": name}).status_code == 201

    first = client.get("/api/brands").json()
    assert [item["name"] for item in first["data"]] == sorted(names)[:10]
    assert first["pagination"] == {
        "page": 1,
        "limit": 10,
        "total": 12,
        "totalPages": 2,
        "hasNext": True,
        "hasPrev": False,
    }

    second = client.get("/api/brands", params={"page": 2}).json()
    assert [item["name"] for item in second["data"]] == sorted(names)[10:]
    assert second["pagination"]["hasNext"] is False
    assert second["pagination"]["hasPrev"] is True


def test_list_brands_page_past_the_end_is_empty(client, brand) -> None:
    body = client.get("/api/brands", params={"page": 5}).json()

    assert body["data"] == []
    assert body["pagination"]["total"] == 1
    assert body["pagination"]["totalPages"] == 1


def test_list_brands_search_and_sort(client) -> None:
    for name in ["Toyota", "Honda", "Hyundai"]:
        client.post("/api/brands", json={"name": name})

    found = client.get("/api/brands", params={"search": "HYU"}).json()
    assert [item["name"] for item in found["data"]] == ["Hyundai"]

    desc = client.get("/api/brands", params={"sortBy": "name", "sortOrder": "desc"}).json()
    assert [item["name"] for item in desc["data"]] == ["Toyota", "Hyundai", "Honda"]

    by_id = client.get("/api/brands", params={"sortBy": "id"}).json()
    assert [item["name"] for item in by_id["data"]] == ["Toyota", "Honda", "Hyundai"]

    fallback = client.get("/api/brands", params={"sortBy": "nope"}).json()
    assert [item["name"] for item in fallback["data"]] == ["Honda", "Hyundai", "Toyota"]


@pytest.mark.parametrize(
    "params",
    [
        {"page": 0},
        {"limit": 0},
        {"limit": 101},
        {"page": "abc"},
        {"sortOrder": "sideways"},
        {"search": "'; DROP TABLE brands"},
    ],
)
def test_list_brands_rejects_invalid_query(client, params: dict) -> None:
    response = client.get("/api/brands", params=params)

    assert response.status_code == 400
    assert response.json()["statusCode"] == 400


def test_get_brand_by_id(client, brand) -> None:
    response = client.get(f"/api/brands/{brand['id']}")

    assert response.status_code == 200
    assert response.json()["data"]["name"] == "Toyota"


def test_get_missing_brand_returns_404(client) -> None:
    response = client.get("/api/brands/999")

    assert response.status_code == 404
    assert response.json()["message"] == "Brand not found"


@pytest.mark.parametrize("brand_id", ["abc", "-1", "0", "1.5"])
def test_invalid_brand_id_returns_400(client, brand_id: str) -> None:
    assert client.get(f"/api/brands/{brand_id}").status_code == 400
    assert client.put(f"/api/brands/{brand_id}", json={"name": "Fiat"}).status_code == 400
    assert client.delete(f"/api/brands/{brand_id}").status_code == 400


def test_update_brand(client, brand) -> None:
    response = client.put(f"/api/brands/{brand['id']}", json={"name": "Toyota Motors"})

    assert response.status_code == 200
    assert response.json()["data"]["name"] == "Toyota Motors"
    assert client.get(f"/api/brands/{brand['id']}").json()["data"]["name"] == "Toyota Motors"


def test_update_brand_keeping_its_own_name(client, brand) -> None:
    response = client.put(f"/api/brands/{brand['id']}", json={"name": "Toyota"})

    assert response.status_code == 200


def test_update_brand_to_taken_name_fails(client, brand) -> None:
    client.post("/api/brands", json={"name": "Honda"})

    response = client.put(f"/api/brands/{brand['id']}", json={"name": "Honda"})

    assert response.status_code == 400
    assert response.json()["message"] == "Brand already exists"
    assert client.get(f"/api/brands/{brand['id']}").json()["data"]["name"] == "Toyota"


def test_update_missing_brand_returns_404(client) -> None:
    assert client.put("/api/brands/999", json={"name": "Fiat"}).status_code == 404


def test_delete_brand_then_get_returns_404(client, brand) -> None:
    response = client.delete(f"/api/brands/{brand['id']}")

    assert response.status_code == 200
    assert response.json() == {"success": True, "data": None}
    assert client.get(f"/api/brands/{brand['id']}").status_code == 404
    assert client.delete(f"/api/brands/{brand['id']}").status_code == 404


def test_delete_brand_cascades_to_models_and_cars(client, brand, vehicle_model, car_payload) -> None:
    car = client.post("/api/cars", json=car_payload).json()["data"]

    assert client.delete(f"/api/brands/{brand['id']}").status_code == 200

    assert client.get(f"/api/models/{vehicle_model['id']}").status_code == 404
    assert client.get(f"/api/cars/{car['id']}").status_code == 404


def test_list_models_of_brand_omits_brand_id(client, brand, vehicle_model) -> None:
    client.post("/api/brands", json={"name": "Honda"})

    response = client.get(f"/api/brands/{brand['id']}/models")

    assert response.status_code == 200
    data = response.json()["data"]
    assert [item["name"] for item in data] == ["testModel"]
    assert "brandId" not in data[0]
    assert data[0]["fipeValue"] == 50000


def test_list_models_of_missing_brand_returns_404(client) -> None:
    assert client.get("/api/brands/999/models").status_code == 404


def test_list_brands_blank_search_is_ignored(client) -> None:
    for name in ["Toyota", "Honda"]:
        client.post("/api/brands", json={"name": name})

    for search in ["", "   "]:
        response = client.get("/api/brands", params={"search": search})

        assert response.status_code == 200
        assert [item["name"] for item in response.json()["data"]] == ["Honda", "Toyota"]
