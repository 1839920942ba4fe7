"""OpenTelemetry tracing setup for the service."""

from .integrations import INTEGRATIONS, Integration, get_integration, integration_available
from .tracer import TracingManager

__all__ = [
    "INTEGRATIONS",
    "Integration",
    "TracingManager",
    "get_integration",
    "integration_available",
]
