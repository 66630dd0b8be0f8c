"""API test fixtures — FastAPI test client with a fresh contact store per test.

Invariants:
    - Every test gets its own InMemoryContactRepository
    - get_contact_service overridden; app.state wired for readiness checks

Design Decisions:
    - ASGITransport does not run lifespan, so fixtures do the wiring lifespan would do
"""

import pytest
from httpx import ASGITransport, AsyncClient

from contact_api.api.dependencies import get_contact_service
from contact_api.infrastructure.memory_store import InMemoryContactRepository
from contact_api.main import app
from contact_api.services.contact_service import ContactService


@pytest.fixture
def store():
    return InMemoryContactRepository()


@pytest.fixture
def service(store):
    return ContactService(store)


@pytest.fixture
async def client(store, service):
    """FastAPI test client with the contact service dependency overridden."""
    app.dependency_overrides[get_contact_service] = lambda: service
    app.state.contact_store = store

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    del app.state.contact_store


@pytest.fixture
async def unwired_client():
    """Client against an app whose lifespan never ran."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
