"""Management endpoints exposing health and metrics."""

from hello_metrics.actuator.routes import health_router, index_router, metrics_router, prometheus_router

ENDPOINT_ROUTERS = {
    "health": health_router,
    "metrics": metrics_router,
    "prometheus": prometheus_router,
}

__all__ = ["ENDPOINT_ROUTERS", "index_router"]
