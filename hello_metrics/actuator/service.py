"""Translate collected metric families into actuator descriptors."""

from __future__ import annotations

from collections import defaultdict
from typing import Iterable

from fastapi import HTTPException
from prometheus_client.metrics_core import Metric
from prometheus_client.samples import Sample

from hello_metrics.actuator.schemas import AvailableTag, Measurement, MetricDescriptor

# Sample suffix -> statistic, per family type.
_STATISTICS: dict[str, dict[str, str]] = {
    "counter": {"_total": "COUNT"},
    "gauge": {"": "VALUE"},
    "untyped": {"": "VALUE"},
    "info": {"_info": "VALUE"},
    "histogram": {"_count": "COUNT", "_sum": "TOTAL"},
    "gaugehistogram": {"_gcount": "COUNT", "_gsum": "TOTAL"},
    "summary": {"_count": "COUNT", "_sum": "TOTAL"},
}

_STRUCTURAL_LABELS = frozenset({"le", "quantile"})


def parse_tags(raw_tags: Iterable[str]) -> list[tuple[str, str]]:
    """Parse ``key:value`` tag filters, rejecting malformed entries with a 400."""

    parsed: list[tuple[str, str]] = []
    for raw in raw_tags:
        key, sep, value = raw.partition(":")
        if not sep or not key or not value:
            raise HTTPException(
                status_code=400,
                detail=f"Each tag parameter must be in the form 'key:value' but was: {raw}",
            )
        parsed.append((key, value))
    return parsed


def _statistic_for(family: Metric, sample: Sample) -> str | None:
    suffixes = _STATISTICS.get(family.type, {})
    statistic = suffixes.get(sample.name[len(family.name):]) if sample.name.startswith(family.name) else None
    if statistic == "TOTAL" and family.unit == "seconds":
        return "TOTAL_TIME"
    return statistic


def _matches(sample: Sample, tags: list[tuple[str, str]]) -> bool:
    return all(sample.labels.get(key) == value for key, value in tags)


def describe_metric(family: Metric, tags: list[tuple[str, str]]) -> MetricDescriptor:
    """Aggregate the samples of ``family`` that carry every requested tag."""

    totals: dict[str, float] = {}
    tag_values: dict[str, set[str]] = defaultdict(set)
    filtered_keys = {key for key, _ in tags}
    matched = False

    for sample in family.samples:
        statistic = _statistic_for(family, sample)
        if statistic is None or not _matches(sample, tags):
            continue
        matched = True
        totals[statistic] = totals.get(statistic, 0.0) + sample.value
        for key, value in sample.labels.items():
            if key in _STRUCTURAL_LABELS or key in filtered_keys:
                continue
            tag_values[key].add(value)

    if tags and not matched:
        raise HTTPException(status_code=404, detail=f"No samples of {family.name} match the requested tags")

    return MetricDescriptor(
        name=family.name,
        description=family.documentation or None,
        base_unit=family.unit or None,
        measurements=[Measurement(statistic=stat, value=value) for stat, value in totals.items()],
        available_tags=[AvailableTag(tag=key, values=sorted(values)) for key, values in sorted(tag_values.items())],
    )
