"""Pytest fixtures for hello-metrics tests."""

from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from hello_metrics.config import Settings
from hello_metrics.lib.metrics import MetricsRegistry
from hello_metrics.main import create_app

TEST_HOSTNAME = "hello-test-host"


@pytest.fixture()
def hostname() -> str:
    return TEST_HOSTNAME


@pytest.fixture()
def settings() -> Settings:
    """Settings isolated from the developer environment and any .env file."""
    return Settings(
        MANAGEMENT_ENDPOINTS_WEB_EXPOSURE_INCLUDE="health,metrics,prometheus",
        LOG_LEVEL="INFO",
        _env_file=None,
    )


@pytest.fixture()
def registry() -> MetricsRegistry:
    """Fresh registry per test, so every application starts with a zero counter."""
    return MetricsRegistry()


@pytest.fixture()
def app(settings: Settings, registry: MetricsRegistry) -> FastAPI:
    """Return a freshly wired application instance."""
    return create_app(settings=settings, registry=registry, resolve_hostname=lambda: TEST_HOSTNAME)


@pytest_asyncio.fixture()
async def async_client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    """Provide an `httpx.AsyncClient` configured for the FastAPI app."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
        yield client
