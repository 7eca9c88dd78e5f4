import os

os.environ["APP_ENV"] = "test"
os.environ["DATABASE_URL"] = "sqlite://"

from dataclasses import replace

import pytest
from fastapi.testclient import TestClient

from inventory_api import models  # noqa: F401
from inventory_api.core.config import load_settings
from inventory_api.db.base import Base
from inventory_api.db.session import build_engine
from inventory_api.main import create_app


@pytest.fixture()
def engine():
    engine = build_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def client(engine):
    settings = replace(load_settings(), db_auto_create=False, seed_demo_data=False)
    app = create_app(settings=settings, engine=engine)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def brand(client) -> dict:
    response = client.post("/api/brands", json={"name": "Toyota"})
    assert response.status_code == 201
    return response.json()["data"]


@pytest.fixture()
def vehicle_model(client, brand) -> dict:
    response = client.post("/api/models", json={"name": "testModel", "brandId": brand["id"], "fipeValue": 50000})
    assert response.status_code == 201
    return response.json()["data"]


@pytest.fixture()
def car_payload(vehicle_model) -> dict:
    return {
        "color": "Vermelho",
        "year": 2020,
        "numberOfPorts": 4,
        "fuel": "Gasolina",
        "value": 50000,
        "modelId": vehicle_model["id"],
    }
