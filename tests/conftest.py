"""Pytest configuration for talent directory tests."""

import os

# Plaintext password hashing for tests; must be set before hashing happens
os.environ["TESTING"] = "true"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Configure Hypothesis before importing test modules
from tests.property_based.config import PropertyTestConfig
PropertyTestConfig.configure_hypothesis()

from talent_directory.auth.dependencies import get_store
from talent_directory.core.base import Base
from talent_directory.kv.memory import InMemoryKeyValueStore
from talent_directory.kv.sql import SqlKeyValueStore
from talent_directory.main import app
from talent_directory.schemas.subscriber import SubscriberCreate
from talent_directory.schemas.talent_pool import TalentPoolCreate
from talent_directory.schemas.tenant import TenantCreate
from talent_directory.services.seed_service import SeedService
from talent_directory.services.subscriber_service import SubscriberService
from talent_directory.services.talent_pool_service import TalentPoolService
from talent_directory.services.tenant_service import TenantService


@pytest.fixture
def store():
    """Provide an empty in-memory key-value store."""
    return InMemoryKeyValueStore()


@pytest.fixture
def seeded_store(store):
    """In-memory store holding the demo tenant's records."""
    SeedService().seed_demo_data(store)
    return store


@pytest.fixture
def db_session():
    """Create a test database session on in-memory SQLite."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = SessionLocal()
    
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def sql_store(db_session):
    """Key-value store backed by the test database."""
    return SqlKeyValueStore(db_session)


@pytest.fixture(params=["memory", "sql"])
def any_store(request):
    """Run a test against every key-value backend."""
    if request.param == "memory":
        return InMemoryKeyValueStore()
    return request.getfixturevalue("sql_store")


@pytest.fixture
def tenant(store):
    """A registered tenant with default branding."""
    return TenantService().create_tenant(
        store,
        TenantCreate(email="recruiter@acme.io", password="s3cret", company_name="Acme Corp")
    )


@pytest.fixture
def make_subscriber(store):
    """Factory creating subscribers in the shared store."""
    def _make(tenant_id, email="candidate@example.com", **fields):
        return SubscriberService().create_subscriber(
            store,
            SubscriberCreate(tenant_id=tenant_id, email=email, **fields)
        )
    return _make


@pytest.fixture
def make_pool(store):
    """Factory creating talent pools in the shared store."""
    def _make(tenant_id, title="Backend", departments=("Engineering",), **fields):
        return TalentPoolService().create_talent_pool(
            store,
            TalentPoolCreate(tenant_id=tenant_id, title=title, departments=list(departments), **fields)
        )
    return _make


@pytest.fixture
def client(store):
    """API client whose requests share the in-memory store."""
    app.dependency_overrides[get_store] = lambda: store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(client):
    """Register a tenant through the API and return its bearer header."""
    response = client.post(
        "/auth/register",
        json={"email": "owner@acme.io", "password": "pw-123", "company_name": "Acme Corp"},
    )
    assert response.status_code == 201
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "property_test: mark test as a property-based test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as integration test"
    )


def pytest_collection_modifyitems(config, items):
    """Add markers based on test location."""
    for item in items:
        if "property_based" in str(item.fspath):
            item.add_marker(pytest.mark.property_test)
        if "test_api" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
