"""Greeting endpoint and its access counter."""

from hello_metrics.hello.metrics import HELLO_COUNTER_NAME, HelloMetrics, bind_hello_counter
from hello_metrics.hello.routes import router
from hello_metrics.hello.service import GreetingService

__all__ = ["GreetingService", "HELLO_COUNTER_NAME", "HelloMetrics", "bind_hello_counter", "router"]
