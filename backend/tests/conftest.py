"""Pytest configuration and fixtures for backend tests."""

from collections.abc import AsyncGenerator, Generator

import pytest
from httpx import ASGITransport, AsyncClient

from icd_predictor.main import app
from icd_predictor.services.icd10_matcher import reset_icd10_matcher_service


@pytest.fixture(autouse=True)
def fresh_matcher_service() -> Generator[None, None, None]:
    """Reset the matcher singleton around each test."""
    reset_icd10_matcher_service()
    yield
    reset_icd10_matcher_service()


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Create async test client.

    The lifespan is not run; endpoints create the matcher on demand.
    """
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
