"""
Pytest configuration and fixtures for SEOscan tests.
"""
import os
from typing import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import AsyncClient, ASGITransport

# Disable rate limiting for tests
os.environ["RATE_LIMIT_ENABLED"] = "false"

from fixtures.fake_site import make_site_handler
from seoscan.api.v1.analyze import get_discovery_probe, get_page_fetcher
from seoscan.services.discovery import DiscoveryProbe
from seoscan.services.fetcher import PageFetcher


# ============================================================================
# Fake Site Fixtures
# ============================================================================

@pytest.fixture
def site_transport() -> httpx.MockTransport:
    """Transport serving the optimized page, robots.txt and a 3-URL sitemap."""
    return httpx.MockTransport(make_site_handler())


@pytest.fixture
def page_fetcher(site_transport) -> PageFetcher:
    return PageFetcher(transport=site_transport)


@pytest.fixture
def discovery_probe(site_transport) -> DiscoveryProbe:
    return DiscoveryProbe(transport=site_transport)


# ============================================================================
# FastAPI App Fixtures
# ============================================================================

@pytest.fixture(scope="function")
def app(page_fetcher: PageFetcher, discovery_probe: DiscoveryProbe) -> FastAPI:
    """Create test FastAPI application with outbound HTTP faked."""
    from seoscan.main import app as main_app

    main_app.dependency_overrides[get_page_fetcher] = lambda: page_fetcher
    main_app.dependency_overrides[get_discovery_probe] = lambda: discovery_probe

    yield main_app

    main_app.dependency_overrides.clear()


@pytest_asyncio.fixture(scope="function")
async def async_client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


# ============================================================================
# Mock Fixtures
# ============================================================================

@pytest.fixture
def mock_redis():
    """Mock Redis client for rate limiting tests."""
    mock = AsyncMock()

    # Pipeline commands are queued synchronously and run on execute()
    pipeline_mock = MagicMock()
    pipeline_mock.execute = AsyncMock(return_value=[0, 0, 1, True])

    mock.pipeline = MagicMock(return_value=pipeline_mock)
    mock.zrem = AsyncMock(return_value=1)
    mock.zrange = AsyncMock(return_value=[])
    mock.aclose = AsyncMock()
    return mock
