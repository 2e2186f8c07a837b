import os

# Force the in-memory SQLite engine before storefront.db.database is imported
os.environ.setdefault("PYTEST_RUNNING", "1")

import pytest
from fastapi.testclient import TestClient

from storefront.api.main import app
from storefront.db.database import SessionLocal, engine, get_db
from storefront.db.models import Base
from storefront.utils.settings import refresh_settings_cache


@pytest.fixture(autouse=True)
def _fresh_schema():
    """Recreate every table so each test starts from an empty database."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture(autouse=True)
def _settings_cache():
    refresh_settings_cache()
    yield
    refresh_settings_cache()


@pytest.fixture
def db_session():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(db_session):
    """TestClient whose requests share the test's session."""

    def _override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = _override_get_db
    try:
        with TestClient(app) as c:
            yield c
    finally:
        app.dependency_overrides.clear()
