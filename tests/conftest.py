"""
Pytest configuration for BizTime API tests.

Every test runs against a fresh in-memory SQLite database seeded with the
reference companies and invoices.
"""
import os
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Keep the application engine off the filesystem during tests
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("LOG_LEVEL", "WARNING")

from apps.api.core.db import Base, get_db, run_migrations  # noqa: E402
from apps.api.core.seed import seed_demo_data  # noqa: E402
from apps.api.main import app  # noqa: E402


@pytest.fixture
def engine():
    """One in-memory database shared by every connection of the test."""
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    run_migrations(bind=test_engine)
    yield test_engine
    Base.metadata.drop_all(bind=test_engine)
    test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    """Seeded session for service-level tests."""
    session = session_factory()
    seed_demo_data(session)
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(db, session_factory):
    """TestClient whose requests use the seeded test database."""

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
