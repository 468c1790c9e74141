"""Shared fixtures for integration tests.

The application is exercised end to end through ``httpx.ASGITransport``
with the taxonomy store replaced by an in-memory one, so no database is
needed. ASGITransport does not run the lifespan, so startup database
checks are skipped as well.
"""

from collections.abc import AsyncGenerator, Generator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from loguru import logger

from src.api.dependencies import get_taxonomy_store
from src.api.main import create_app
from src.core.logging import _state
from src.domain.store import InMemoryTaxonomyStore, TaxonomyStore


@pytest.fixture(autouse=True)
def quiet_logging() -> Generator[None]:
    """Keep create_app from installing sinks during tests."""
    previous = _state.configured
    _state.configured = True
    logger.remove()
    yield
    _state.configured = previous


def build_app(store: TaxonomyStore) -> FastAPI:
    """Create an application whose routes read from ``store``."""
    application = create_app()
    application.dependency_overrides[get_taxonomy_store] = lambda: store
    return application


@pytest.fixture
def app(taxonomy_store: InMemoryTaxonomyStore) -> FastAPI:
    return build_app(taxonomy_store)


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """HTTP client bound to the application under test."""
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
