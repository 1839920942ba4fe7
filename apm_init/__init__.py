"""APM tracing initialization for the web service."""

from .initializer import configure_tracing, get_tracer, get_tracing_manager, shutdown_tracing
from .settings import ENVIRONMENT, SERVICE_NAME, TracingSettings, build_settings

__all__ = [
    "SERVICE_NAME",
    "ENVIRONMENT",
    "TracingSettings",
    "build_settings",
    "configure_tracing",
    "get_tracer",
    "get_tracing_manager",
    "shutdown_tracing",
]
