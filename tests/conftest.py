import os

# Settings are read at import time; required values must exist first.
os.environ.setdefault("MONGO_URL", "mongodb://localhost:27017")
os.environ.setdefault("MONGO_DB_NAME", "ecom_test")
os.environ.setdefault("JWT_SECRET", "test-secret")

import mongomock  # noqa: E402
import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from app.core.config import get_settings  # noqa: E402
from app.main import create_app  # noqa: E402


@pytest.fixture
def mongo_client():
    return mongomock.MongoClient(tz_aware=True)


@pytest.fixture
def db(mongo_client):
    return mongo_client[get_settings().MONGO_DB_NAME]


@pytest.fixture
def app(mongo_client):
    return create_app(mongo_client=mongo_client)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def registered(client):
    """Body of a successful registration: {token, user}."""
    response = client.post(
        "/api/register",
        json={"name": "Alice", "email": "alice@example.com", "password": "s3cret"},
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def auth_headers(registered):
    return {"Authorization": f"Bearer {registered['token']}"}


@pytest.fixture
def item(client, auth_headers):
    response = client.post(
        "/api/items",
        json={"title": "Mug", "des": "Ceramic mug", "price": 9.99, "image": "mug.png"},
        headers=auth_headers,
    )
    assert response.status_code == 201
    return response.json()
