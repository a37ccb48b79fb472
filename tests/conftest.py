import pytest
from fastapi.testclient import TestClient

from nc_news.core.config import Settings
from nc_news.db.data.test_data import test_data
from nc_news.db.seed import seed
from nc_news.main import create_app


@pytest.fixture()
def test_settings():
    return Settings(DATABASE_URL="sqlite://", ENVIRONMENT="test", SEED_ON_STARTUP=False)


@pytest.fixture()
def app(test_settings):
    return create_app(test_settings)


@pytest.fixture()
def client(app):
    # Entering the client runs the lifespan, which builds the in-memory store.
    with TestClient(app) as test_client:
        with app.state.session_factory() as db:
            seed(db, test_data)
        yield test_client


@pytest.fixture()
def db(client):
    with client.app.state.session_factory() as session:
        yield session
