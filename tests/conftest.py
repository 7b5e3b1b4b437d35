"""
pytest configuration and fixtures.
"""

from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from product_api.api import create_app
from product_api.data.database import build_session_factory, init_db


def make_engine():
    """In-memory SQLite shared by every thread of the test client."""
    return create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )


@pytest.fixture
def engine():
    engine = make_engine()
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    db = build_session_factory(engine)()
    yield db
    db.close()


@pytest.fixture
def client(engine) -> Generator[TestClient, None, None]:
    """Test client around an app with an empty products table."""
    app = create_app(engine)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sample_product() -> dict:
    return {
        "name": "Test Product",
        "price": 9.99,
        "description": "This is a test product",
    }
