"""Greeting endpoint and access counter tests."""

import asyncio
import socket

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from hello_metrics.lib.hostname import HostResolutionError
from hello_metrics.lib.metrics import MetricsRegistry
from hello_metrics.main import create_app


@pytest.mark.asyncio
async def test_greeting_reports_hostname_and_counter(async_client: AsyncClient, hostname: str) -> None:
    """Root route should greet with the host name and the first counter value."""
    response = await async_client.get("/")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text == f"Hello world from {hostname}!\nCounter value: 1"


@pytest.mark.asyncio
async def test_sequential_greetings_count_up(async_client: AsyncClient) -> None:
    values = []
    for _ in range(5):
        response = await async_client.get("/")
        values.append(int(response.text.rsplit(": ", 1)[1]))

    assert values == [1, 2, 3, 4, 5]


@pytest.mark.asyncio
async def test_concurrent_greetings_lose_no_increments(app: FastAPI, async_client: AsyncClient) -> None:
    """Every concurrent request is counted exactly once, whatever order replies arrive in."""
    await async_client.get("/")
    before = app.state.hello_metrics.current_value()

    responses = await asyncio.gather(*(async_client.get("/") for _ in range(50)))

    assert all(response.status_code == 200 for response in responses)
    reported = sorted(int(response.text.rsplit(": ", 1)[1]) for response in responses)
    assert reported[-1] <= before + 50
    assert app.state.hello_metrics.current_value() == before + 50


@pytest.mark.asyncio
async def test_hostname_failure_returns_server_error_without_counting(settings, registry: MetricsRegistry) -> None:
    def failing_resolver() -> str:
        raise HostResolutionError("broken-host")

    app = create_app(settings=settings, registry=registry, resolve_hostname=failing_resolver)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
        response = await client.get("/")

    assert response.status_code == 500
    assert response.json() == {"ok": False, "detail": "Unable to resolve local hostname"}
    assert app.state.hello_metrics.current_value() == 0


@pytest.mark.asyncio
async def test_apps_own_independent_counters(settings) -> None:
    first = create_app(settings=settings, registry=MetricsRegistry(), resolve_hostname=lambda: "a")
    second = create_app(settings=settings, registry=MetricsRegistry(), resolve_hostname=lambda: "b")

    async with AsyncClient(transport=ASGITransport(app=first), base_url="http://testserver") as client:
        await client.get("/")
        await client.get("/")
    async with AsyncClient(transport=ASGITransport(app=second), base_url="http://testserver") as client:
        response = await client.get("/")

    assert response.text.endswith("Counter value: 1")
    assert first.state.hello_metrics.current_value() == 2


@pytest.mark.asyncio
async def test_default_resolver_uses_local_host_lookup(monkeypatch, settings) -> None:
    monkeypatch.setattr(socket, "gethostname", lambda: "pod-7")
    monkeypatch.setattr(socket, "getaddrinfo", lambda name, port: [(socket.AF_INET6, socket.SOCK_STREAM, 6, "", ("fd00::7", 0, 0, 0))])
    monkeypatch.setattr(socket, "gethostbyaddr", lambda addr: ("pod-7.default.svc", [], [addr]))

    app = create_app(settings=settings, registry=MetricsRegistry())
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
        response = await client.get("/")

    assert response.text == "Hello world from pod-7.default.svc!\nCounter value: 1"
