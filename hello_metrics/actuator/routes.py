"""Management endpoints: discovery, health, metrics and Prometheus scrape."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.responses import JSONResponse, Response
from prometheus_client import CONTENT_TYPE_LATEST

from hello_metrics.actuator.schemas import ActuatorIndex, HealthStatus, Link, MetricNames
from hello_metrics.actuator.service import describe_metric, parse_tags
from hello_metrics.lib.metrics import MetricsRegistry

index_router = APIRouter(prefix="/actuator")
health_router = APIRouter(prefix="/actuator")
metrics_router = APIRouter(prefix="/actuator")
prometheus_router = APIRouter(prefix="/actuator")


def get_metrics_registry(request: Request) -> MetricsRegistry:
    registry: MetricsRegistry | None = getattr(request.app.state, "metrics_registry", None)
    if registry is None:
        raise RuntimeError("Metrics registry not configured on application state")
    return registry


@index_router.get("", summary="Links to the exposed management endpoints")
async def actuator_index(request: Request) -> JSONResponse:
    base = str(request.base_url).rstrip("/") + "/actuator"
    exposed: frozenset[str] = request.app.state.exposed_endpoints  # type: ignore[attr-defined]

    links: dict[str, Link] = {"self": Link(href=base)}
    if "health" in exposed:
        links["health"] = Link(href=f"{base}/health")
        links["health-path"] = Link(href=f"{base}/health/{{*path}}", templated=True)
    if "metrics" in exposed:
        links["metrics-requiredMetricName"] = Link(href=f"{base}/metrics/{{requiredMetricName}}", templated=True)
        links["metrics"] = Link(href=f"{base}/metrics")
    if "prometheus" in exposed:
        links["prometheus"] = Link(href=f"{base}/prometheus")

    return JSONResponse(ActuatorIndex(links=links).model_dump(mode="json", by_alias=True))


@health_router.get("/health", summary="Health check")
async def health() -> JSONResponse:
    """Return liveness response for uptime monitoring."""

    return JSONResponse(HealthStatus().model_dump(mode="json"))


@health_router.get("/health/{group}", summary="Kubernetes probe groups")
async def health_group(group: str) -> JSONResponse:
    if group not in {"liveness", "readiness"}:
        raise HTTPException(status_code=404, detail=f"Unknown health group: {group}")
    return JSONResponse(HealthStatus().model_dump(mode="json"))


@metrics_router.get("/metrics", summary="Registered metric names")
async def metric_names(registry: MetricsRegistry = Depends(get_metrics_registry)) -> JSONResponse:
    return JSONResponse(MetricNames(names=registry.names()).model_dump(mode="json"))


@metrics_router.get("/metrics/{name}", summary="Metric metadata and current measurements")
async def metric_detail(
    name: str,
    tag: list[str] | None = Query(default=None),
    registry: MetricsRegistry = Depends(get_metrics_registry),
) -> JSONResponse:
    tags = parse_tags(tag or [])
    family = registry.find(name)
    if family is None:
        raise HTTPException(status_code=404, detail=f"Metric not found: {name}")
    descriptor = describe_metric(family, tags)
    return JSONResponse(descriptor.model_dump(mode="json", by_alias=True))


@prometheus_router.get("/prometheus", summary="Prometheus scrape endpoint")
async def prometheus_scrape(registry: MetricsRegistry = Depends(get_metrics_registry)) -> Response:
    return Response(content=registry.scrape(), media_type=CONTENT_TYPE_LATEST)
