"""Response models for the management endpoints."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class HealthStatus(BaseModel):
    status: str = "UP"


class MetricNames(BaseModel):
    """Names of every metric family known to the registry."""

    names: list[str]


class Measurement(BaseModel):
    statistic: str
    value: float


class AvailableTag(BaseModel):
    tag: str
    values: list[str]


class MetricDescriptor(BaseModel):
    """Metadata and aggregated measurements for one metric family."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    description: str | None = None
    base_unit: str | None = Field(default=None, alias="baseUnit")
    measurements: list[Measurement] = Field(default_factory=list)
    available_tags: list[AvailableTag] = Field(default_factory=list, alias="availableTags")


class Link(BaseModel):
    href: str
    templated: bool = False


class ActuatorIndex(BaseModel):
    links: dict[str, Link] = Field(alias="_links")

    model_config = ConfigDict(populate_by_name=True)
