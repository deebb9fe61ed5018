import pytest
from fastapi.testclient import TestClient

from reading_list_api.app.core.config import Settings
from reading_list_api.app.core.store import BookStore
from reading_list_api.app.main import create_app


@pytest.fixture
def store():
    return BookStore()


@pytest.fixture
def app(store):
    return create_app(Settings(books_seed_file=None), store=store)


@pytest.fixture
def client(app):
    return TestClient(app)
