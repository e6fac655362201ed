"""In-process meter registry backed by ``prometheus_client``."""

from __future__ import annotations

import threading
from typing import Dict, Iterable, Sequence

from prometheus_client import (
    CollectorRegistry,
    Counter,
    GCCollector,
    Histogram,
    PlatformCollector,
    ProcessCollector,
    generate_latest,
)
from prometheus_client.metrics_core import Metric

from hello_metrics.lib.logger import get_logger

logger = get_logger(__name__)


class MetricsRegistry:
    """Owns a collector registry and the meters registered into it.

    Meter creation is idempotent: asking twice for the same name returns the
    meter created the first time instead of failing on duplicate registration.
    """

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        self._lock = threading.Lock()
        self._registry = registry if registry is not None else CollectorRegistry(auto_describe=True)
        self._counters: Dict[str, Counter] = {}
        self._histograms: Dict[str, Histogram] = {}
        self._runtime_registered = False

    @property
    def collector_registry(self) -> CollectorRegistry:
        return self._registry

    def counter(self, name: str, description: str) -> Counter:
        with self._lock:
            counter = self._counters.get(name)
            if counter is None:
                counter = Counter(name, description, registry=self._registry)
                self._counters[name] = counter
                logger.info("metrics.meter.registered", extra={"metric": name, "meter_type": "counter"})
            return counter

    def histogram(
        self,
        name: str,
        description: str,
        labelnames: Sequence[str] = (),
        unit: str = "",
    ) -> Histogram:
        with self._lock:
            histogram = self._histograms.get(name)
            if histogram is None:
                histogram = Histogram(name, description, labelnames, unit=unit, registry=self._registry)
                self._histograms[name] = histogram
                logger.info("metrics.meter.registered", extra={"metric": name, "meter_type": "histogram"})
            return histogram

    def register_runtime_collectors(self) -> None:
        """Expose Python process, platform and GC metrics alongside application meters."""

        with self._lock:
            if self._runtime_registered:
                return
            ProcessCollector(registry=self._registry)
            PlatformCollector(registry=self._registry)
            GCCollector(registry=self._registry)
            self._runtime_registered = True

    def collect(self) -> Iterable[Metric]:
        return self._registry.collect()

    def names(self) -> list[str]:
        return sorted({family.name for family in self.collect()})

    def find(self, name: str) -> Metric | None:
        for family in self.collect():
            if family.name == name:
                return family
        return None

    def scrape(self) -> bytes:
        """Serialize every registered family in the text exposition format."""

        return generate_latest(self._registry)
