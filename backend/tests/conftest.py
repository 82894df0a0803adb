import pytest
from fastapi.testclient import TestClient

from mechcare.core.config import Settings
from mechcare.core.store import JsonFileStore
from mechcare.main import create_app
from mechcare.services.repository import Repository


@pytest.fixture
def data_file(tmp_path):
    return str(tmp_path / "data" / "mechcare-data.json")

@pytest.fixture
def store(data_file):
    return JsonFileStore(data_file)

@pytest.fixture
def repo(store):
    return Repository(store)

@pytest.fixture
def app(data_file):
    return create_app(Settings(data_file=data_file, cors_allow_origins=["*"]))

@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c

@pytest.fixture
def machine_payload():
    return {
        "name": "Hydraulic Press",
        "userName": "Ali",
        "mobileNumber": "0555 000 0001",
        "type": "Press",
        "interval": 30,
        "runtimeHours": 12.5,
        "lastMaintenance": "2024-01-01",
    }
