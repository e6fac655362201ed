"""Greeting service producing the plain-text hello response."""

from __future__ import annotations

from typing import Callable

from hello_metrics.hello.metrics import HelloMetrics
from hello_metrics.lib.hostname import resolve_local_hostname

GREETING_TEMPLATE = "Hello world from {hostname}!\nCounter value: {value}"


class GreetingService:
    """Count an access and describe it.

    The host name is resolved before the counter moves, so a request that
    fails hostname resolution is not counted.
    """

    def __init__(
        self,
        metrics: HelloMetrics,
        resolve_hostname: Callable[[], str] = resolve_local_hostname,
    ) -> None:
        self._metrics = metrics
        self._resolve_hostname = resolve_hostname

    def greet(self) -> str:
        hostname = self._resolve_hostname()
        self._metrics.increment()
        return GREETING_TEMPLATE.format(hostname=hostname, value=self._metrics.current_value())
