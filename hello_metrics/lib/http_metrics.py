"""Request timing middleware recording into the application's metrics registry."""

from __future__ import annotations

import time
from typing import Awaitable, Callable

from fastapi import FastAPI, Request
from fastapi.responses import Response

from hello_metrics.lib.metrics import MetricsRegistry

HTTP_REQUESTS_METRIC = "http_server_requests"
_UNKNOWN_URI = "UNKNOWN"


def _route_template(request: Request) -> str:
    # Routing stores the matched route in the scope once call_next has run.
    route = request.scope.get("route")
    return getattr(route, "path", None) or _UNKNOWN_URI


def install_http_metrics(app: FastAPI, registry: MetricsRegistry) -> None:
    """Time every request into ``http_server_requests_seconds``."""

    histogram = registry.histogram(
        HTTP_REQUESTS_METRIC,
        "Duration of HTTP server request handling",
        ("method", "uri", "status"),
        unit="seconds",
    )

    @app.middleware("http")
    async def record_request(request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
        start = time.perf_counter()
        status = 500
        try:
            response = await call_next(request)
            status = response.status_code
            return response
        finally:
            histogram.labels(
                method=request.method,
                uri=_route_template(request),
                status=str(status),
            ).observe(time.perf_counter() - start)
