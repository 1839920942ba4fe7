"""Core modules for APM tracing initialization."""

from .exceptions import (
    ApmInitError,
    ConfigurationError,
    ErrorSeverity,
    InstrumentationError,
)

__all__ = [
    "ApmInitError",
    "ConfigurationError",
    "InstrumentationError",
    "ErrorSeverity",
]
