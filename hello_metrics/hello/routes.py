"""Greeting route."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from hello_metrics.hello.service import GreetingService

router = APIRouter()


def get_greeting_service(request: Request) -> GreetingService:
    service: GreetingService | None = getattr(request.app.state, "greeting_service", None)
    if service is None:
        raise RuntimeError("Greeting service not configured on application state")
    return service


@router.get("/", response_class=PlainTextResponse, summary="Greet and count the access")
def hello(service: GreetingService = Depends(get_greeting_service)) -> PlainTextResponse:
    # Sync handler: runs on the server's worker thread pool, hostname lookup blocks.
    return PlainTextResponse(service.greet())
