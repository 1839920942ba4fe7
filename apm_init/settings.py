"""Tracing settings record and the startup loader that builds it."""

from typing import Callable, FrozenSet, Optional

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .core.exceptions import ConfigurationError
from .tracing.integrations import INTEGRATIONS, integration_available

SERVICE_NAME = "ruby-app"
ENVIRONMENT = "production"


class TracingSettings(BaseModel):
    """Immutable tracing configuration handed to the tracing manager."""

    model_config = ConfigDict(frozen=True)

    service_name: str = Field(..., description="Service tag attached to all telemetry")
    environment: str = Field(..., description="Deployment environment tag")
    instrumentations: FrozenSet[str] = Field(
        default_factory=frozenset, description="Enabled integration names"
    )

    @field_validator("service_name", "environment")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be empty")
        return v

    @field_validator("instrumentations")
    @classmethod
    def validate_instrumentations(cls, v: FrozenSet[str]) -> FrozenSet[str]:
        unknown = sorted(set(v) - set(INTEGRATIONS))
        if unknown:
            raise ValueError(f"Unknown integrations: {unknown}")
        return v


def build_settings(probe: Optional[Callable[[str], bool]] = None) -> TracingSettings:
    """
    Build the tracing settings for this process.

    Always-on integrations are enabled unconditionally; the others only
    when ``probe`` reports their client class as present.

    Args:
        probe: Presence check taking an integration name (defaults to
            ``integration_available``)

    Returns:
        Frozen TracingSettings
    """
    probe = probe or integration_available

    enabled = set()
    for name, integration in INTEGRATIONS.items():
        if integration.always_on or probe(name):
            enabled.add(name)
        else:
            logger.debug(f"Skipping {name} integration: client not loaded")

    try:
        return TracingSettings(
            service_name=SERVICE_NAME,
            environment=ENVIRONMENT,
            instrumentations=frozenset(enabled),
        )
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid tracing settings: {e}", config_key="settings"
        ) from e
