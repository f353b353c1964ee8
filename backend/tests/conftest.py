from __future__ import annotations

import pytest
from starlette.testclient import TestClient

from app.core.config import Settings
from app.core.storage import MemoryStorage
from app.main import create_app
from app.services.employee_manager import EmployeeManager

ADMIN_EMAIL = "admin@workplace.com"
ADMIN_PASSWORD = "work123"


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def test_settings():
    return Settings(STORAGE_PATH="", SEARCH_DEBOUNCE_MS=100)


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def manager(storage, test_settings):
    return EmployeeManager(storage, test_settings)


@pytest.fixture
def client(test_settings):
    with TestClient(create_app(test_settings)) as c:
        yield c


@pytest.fixture
def authenticated_client(client):
    response = client.post(
        "/api/v1/auth/login",
        json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD},
    )
    assert response.status_code == 200
    return client
