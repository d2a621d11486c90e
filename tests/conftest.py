import pytest
from fastapi.testclient import TestClient

from labdesk.core.config import Settings
from labdesk.main import create_app
from labdesk.services.collection_store import CollectionStore

ADMIN_PASS = "test-admin-pass"


@pytest.fixture
def settings(tmp_path):
    return Settings(
        ADMIN_PASS=ADMIN_PASS,
        DATA_DIR=str(tmp_path / "data"),
        STATIC_DIR=str(tmp_path / "public"),
        ERROR_LOG_PATH="",
    )


@pytest.fixture
def store(settings):
    store = CollectionStore(settings.DATA_DIR)
    store.ensure_data_dir()
    return store


@pytest.fixture
def client(settings):
    # Context manager runs the lifespan, which creates the data directory
    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest.fixture
def admin_headers():
    return {"X-Admin-Pass": ADMIN_PASS}
