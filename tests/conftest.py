# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.database import ProductStore
from app.main import create_app

API_KEY = "test-key"
AUTH = {"x-api-key": API_KEY}


@pytest.fixture
def store():
    return ProductStore.with_sample_data()


@pytest.fixture
def app(store):
    return create_app(store=store, settings=Settings(api_key=API_KEY))


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def new_product():
    return {
        "name": "Desk Lamp",
        "description": "LED lamp with dimmer",
        "price": 24.5,
        "category": "Home",
        "inStock": True,
    }


@pytest.fixture
def auth():
    return dict(AUTH)
