import pytest


def test_create_model(client, brand) -> None:
    response = client.post("/api/models", json={"name": " Corolla ", "brandId": brand["id"], "fipeValue": 120000.5})

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["name"] == "Corolla"
    assert data["brandId"] == brand["id"]
    assert data["fipeValue"] == 120000.5


def test_create_model_with_missing_brand_fails(client) -> None:
    response = client.post("/api/models", json={"name": "Corolla", "brandId": 999, "fipeValue": 1000})

    assert response.status_code == 400
    assert response.json()["message"] == "Referenced brand does not exist"


@pytest.mark.parametrize(
    "overrides",
    [
        {"brandId": "999999"},
        {"brandId": 0},
        {"brandId": None},
        {"fipeValue": -1},
        {"fipeValue": "abc"},
        {"name": "<i>Corolla</i>"},
        {"name": "Corolla; --"},
        {"name": ""},
    ],
)
def test_create_model_rejects_invalid_payload(client, brand, overrides: dict) -> None:
    payload = {"name": "Corolla", "brandId": brand["id"], "fipeValue": 1000, **overrides}

    response = client.post("/api/models", json=payload)

    assert response.status_code == 400
    assert response.json()["statusCode"] == 400


def test_create_model_rejects_duplicate_name(client, brand, vehicle_model) -> None:
    response = client.post("/api/models", json={"name": "testModel", "brandId": brand["id"], "fipeValue": 1})

    assert response.status_code == 400
    assert response.json()["message"] == "A model with this name already exists"


def test_list_models_filters_by_brand_and_search(client, brand, vehicle_model) -> None:
    other = client.post("/api/brands", json={"name": "Honda"}).json()["data"]
    client.post("/api/models", json={"name": "Civic", "brandId": other["id"], "fipeValue": 90000})
    client.post("/api/models", json={"name": "City", "brandId": other["id"], "fipeValue": 70000})

    everything = client.get("/api/models").json()
    assert everything["pagination"]["total"] == 3
    assert everything["pagination"]["limit"] == 10

    honda = client.get("/api/models", params={"brandId": other["id"]}).json()
    assert [item["name"] for item in honda["data"]] == ["Civic", "City"]

    searched = client.get("/api/models", params={"search": "ci"}).json()
    assert {item["name"] for item in searched["data"]} == {"Civic", "City"}

    by_value = client.get("/api/models", params={"sortBy": "fipeValue", "sortOrder": "desc"}).json()
    assert [item["fipeValue"] for item in by_value["data"]] == [90000, 70000, 50000]


def test_list_models_pagination(client, brand) -> None:
    for index in range(1, 13):
        client.post("/api/models", json={"name": f"Model {index}", "brandId": brand["id"], "fipeValue": index})

    body = client.get("/api/models", params={"page": 2, "limit": 5}).json()

    assert [item["name"] for item in body["data"]] == [f"Model {index}" for index in range(6, 11)]
    assert body["pagination"]["totalPages"] == 3
    assert body["pagination"]["hasNext"] is True
    assert body["pagination"]["hasPrev"] is True


def test_get_model(client, vehicle_model) -> None:
    response = client.get(f"/api/models/{vehicle_model['id']}")

    assert response.status_code == 200
    assert response.json()["data"]["name"] == "testModel"
    assert client.get("/api/models/999").json()["message"] == "Model not found"
    assert client.get("/api/models/abc").status_code == 400


def test_update_model_round_trip(client, brand, vehicle_model) -> None:
    other = client.post("/api/brands", json={"name": "Honda"}).json()["data"]
    payload = {"name": "Civic", "brandId": other["id"], "fipeValue": 95000}

    response = client.put(f"/api/models/{vehicle_model['id']}", json=payload)

    assert response.status_code == 200
    fetched = client.get(f"/api/models/{vehicle_model['id']}").json()["data"]
    assert fetched["name"] == "Civic"
    assert fetched["brandId"] == other["id"]
    assert fetched["fipeValue"] == 95000


def test_invalid_update_leaves_model_unchanged(client, brand, vehicle_model) -> None:
    response = client.put(
        f"/api/models/{vehicle_model['id']}",
        json={"name": "  ", "brandId": brand["id"], "fipeValue": 10},
    )
    assert response.status_code == 400

    response = client.put(
        f"/api/models/{vehicle_model['id']}",
        json={"name": "Civic", "brandId": 999, "fipeValue": 10},
    )
    assert response.status_code == 400

    fetched = client.get(f"/api/models/{vehicle_model['id']}").json()["data"]
    assert fetched["name"] == "testModel"
    assert fetched["fipeValue"] == 50000


def test_update_missing_model_returns_404(client, brand) -> None:
    response = client.put("/api/models/999", json={"name": "Civic", "brandId": brand["id"], "fipeValue": 10})

    assert response.status_code == 404


def test_delete_model_cascades_to_cars(client, vehicle_model, car_payload) -> None:
    car = client.post("/api/cars", json=car_payload).json()["data"]

    response = client.delete(f"/api/models/{vehicle_model['id']}")

    assert response.status_code == 200
    assert response.json()["success"] is True
    assert client.get(f"/api/models/{vehicle_model['id']}").status_code == 404
    assert client.get(f"/api/cars/{car['id']}").status_code == 404
