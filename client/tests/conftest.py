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
from inventory_client.client import ApiClient
from inventory_client.config import ClientSettings

BASE_URL = "http://testserver/api"


class RecordingSession:
    """Delegates to the test client and keeps a log of outgoing requests."""

    def __init__(self, inner) -> None:
        self.inner = inner
        self.calls: list[tuple[str, str]] = []
        self.before_request = None

    def request(self, method: str, url: str, **kwargs):
        self.calls.append((method, url))
        if self.before_request is not None:
            self.before_request(method, url)
        return self.inner.request(method, url, **kwargs)


@pytest.fixture()
def test_client():
    engine = build_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    settings = replace(load_settings(), db_auto_create=False, seed_demo_data=False)
    with TestClient(create_app(settings=settings, engine=engine)) as client:
        yield client
    engine.dispose()


@pytest.fixture()
def client_settings() -> ClientSettings:
    return ClientSettings(api_url=BASE_URL, timeout_seconds=0, max_retries=2, backoff_seconds=0)


@pytest.fixture()
def session(test_client) -> RecordingSession:
    return RecordingSession(test_client)


@pytest.fixture()
def api(session, client_settings) -> ApiClient:
    return ApiClient(session=session, settings=client_settings)
