"""Fixtures for API tests."""

from collections.abc import AsyncGenerator, Callable, Generator
from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient

from src.api.main import app
from src.core.interfaces.service_store import IServiceStore


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient, None]:
    """Create async test client. The lifespan is not run."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def override() -> Generator[Callable[[Callable, object], None], None, None]:
    """Replace a dependency provider with a fixed instance for one test."""
    replaced: list[Callable] = []

    def _override(provider: Callable, instance: object) -> None:
        app.dependency_overrides[provider] = lambda: instance
        replaced.append(provider)

    yield _override

    for provider in replaced:
        app.dependency_overrides.pop(provider, None)


@pytest.fixture
def catalog_store(xerox_a4, lamination_a4, spiral_binding) -> AsyncMock:
    """Service store mock holding three services."""
    catalog = {s.id: s for s in (xerox_a4, lamination_a4, spiral_binding)}
    store = AsyncMock(spec=IServiceStore)
    store.list_services.return_value = list(catalog.values())
    store.get_service.side_effect = lambda service_id: catalog.get(service_id)
    return store
