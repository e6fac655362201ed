"""Application configuration loading via Pydantic settings."""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

ACTUATOR_ENDPOINTS = ("health", "metrics", "prometheus")


class Settings(BaseSettings):
    """Runtime configuration sourced from environment variables."""

    app_name: str = Field(default="hello-metrics", alias="APP_NAME")
    server_host: str = Field(default="0.0.0.0", alias="SERVER_HOST")
    server_port: int = Field(default=8080, alias="PORT")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO", alias="LOG_LEVEL")
    management_endpoints_exposure: str = Field(
        default="health,metrics,prometheus",
        alias="MANAGEMENT_ENDPOINTS_WEB_EXPOSURE_INCLUDE",
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: Any) -> Any:
        return value.strip().upper() if isinstance(value, str) else value

    @property
    def exposed_endpoints(self) -> frozenset[str]:
        """Return the actuator endpoint ids to route; ``*`` selects all of them."""

        requested = {item.strip().lower() for item in self.management_endpoints_exposure.split(",")}
        requested.discard("")
        if "*" in requested:
            return frozenset(ACTUATOR_ENDPOINTS)
        return frozenset(requested.intersection(ACTUATOR_ENDPOINTS))


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()
