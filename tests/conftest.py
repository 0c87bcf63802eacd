import pytest
from fastapi.testclient import TestClient

from expense_api.core.config import Settings
from expense_api.main import create_app


@pytest.fixture
def settings():
    return Settings(seed_demo_data=True, debug=False)


@pytest.fixture
def app(settings):
    return create_app(settings_override=settings)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def valid_payload():
    return {
        "amount": 50,
        "description": "Lunch",
        "category": "Food",
        "date": "2025-12-05",
    }
