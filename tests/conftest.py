import pytest
from fastapi.testclient import TestClient

from book_store_api.app.main import create_app
from book_store_api.app.services.book_service import BookStore


@pytest.fixture
def store() -> BookStore:
    return BookStore.seeded()


@pytest.fixture
def client(store: BookStore) -> TestClient:
    """HTTP client for an app serving a freshly seeded store."""
    with TestClient(create_app(store=store)) as tc:
        yield tc
