"""Access counter binding and the facade greeting code talks to."""

from __future__ import annotations

from prometheus_client import Counter

from hello_metrics.lib.metrics import MetricsRegistry

HELLO_COUNTER_NAME = "hello_counter"
HELLO_COUNTER_DESCRIPTION = "Access counter"


def bind_hello_counter(registry: MetricsRegistry) -> Counter:
    """Return the access counter registered in ``registry``, creating it on first use."""

    return registry.counter(HELLO_COUNTER_NAME, HELLO_COUNTER_DESCRIPTION)


class HelloMetrics:
    """Hide the metrics backend behind increment/read operations."""

    def __init__(self, counter: Counter) -> None:
        self._counter = counter

    def increment(self) -> None:
        self._counter.inc()

    def current_value(self) -> int:
        for family in self._counter.collect():
            for sample in family.samples:
                if sample.name.endswith("_total"):
                    return int(sample.value)
        return 0
