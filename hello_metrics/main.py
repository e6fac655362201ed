"""FastAPI application entrypoint for the hello-metrics service."""

from __future__ import annotations

from typing import Callable

from fastapi import FastAPI
from fastapi.requests import Request
from fastapi.responses import JSONResponse

from hello_metrics import __version__
from hello_metrics.actuator import ENDPOINT_ROUTERS, index_router
from hello_metrics.config import Settings, get_settings
from hello_metrics.hello import GreetingService, HelloMetrics, bind_hello_counter, router as hello_router
from hello_metrics.lib.hostname import HostResolutionError, resolve_local_hostname
from hello_metrics.lib.http_metrics import install_http_metrics
from hello_metrics.lib.logger import configure_logging, get_logger
from hello_metrics.lib.metrics import MetricsRegistry

logger = get_logger(__name__)


async def handle_host_resolution_error(request: Request, exc: HostResolutionError) -> JSONResponse:
    logger.warning(
        "hello.hostname.unresolved",
        extra={"hostname": exc.hostname, "path": request.url.path},
    )
    return JSONResponse(
        status_code=500,
        content={"ok": False, "detail": "Unable to resolve local hostname"},
    )


def create_app(
    settings: Settings | None = None,
    registry: MetricsRegistry | None = None,
    resolve_hostname: Callable[[], str] = resolve_local_hostname,
) -> FastAPI:
    """Build the application and wire registry, counter, facade and service together."""

    settings = settings or get_settings()
    configure_logging(settings.log_level)

    if registry is None:
        registry = MetricsRegistry()
        registry.register_runtime_collectors()

    metrics = HelloMetrics(bind_hello_counter(registry))
    exposed = settings.exposed_endpoints

    app = FastAPI(title=settings.app_name, version=__version__)
    app.state.settings = settings
    app.state.metrics_registry = registry
    app.state.hello_metrics = metrics
    app.state.greeting_service = GreetingService(metrics, resolve_hostname=resolve_hostname)
    app.state.exposed_endpoints = exposed

    install_http_metrics(app, registry)
    app.add_exception_handler(HostResolutionError, handle_host_resolution_error)  # type: ignore[arg-type]

    app.include_router(hello_router, tags=["hello"])
    app.include_router(index_router, tags=["actuator"])
    for endpoint_id, endpoint_router in ENDPOINT_ROUTERS.items():
        if endpoint_id in exposed:
            app.include_router(endpoint_router, tags=["actuator"])

    logger.info(
        "app.startup",
        extra={"app_name": settings.app_name, "exposed_endpoints": sorted(exposed)},
    )
    return app


app = create_app()
