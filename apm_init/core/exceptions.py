"""Custom exception hierarchy for APM tracing initialization."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ErrorSeverity(Enum):
    """Error severity levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


@dataclass
class ApmInitError(Exception):
    """Base exception for tracing initialization."""

    message: str
    severity: ErrorSeverity
    context: dict[str, Any] | None = None
    recoverable: bool = True
    retry_count: int = 0

    def __str__(self) -> str:
        return f"[{self.severity.value.upper()}] {self.message}"


class ConfigurationError(ApmInitError):
    """Invalid tracing settings or exporter configuration."""

    def __init__(
        self,
        message: str,
        config_key: str | None = None,
        severity: ErrorSeverity = ErrorSeverity.HIGH,
        **kwargs: Any,
    ):
        context = kwargs.pop("context", None) or {}
        if config_key:
            context["config_key"] = config_key
        super().__init__(message, severity, context, **kwargs)


class InstrumentationError(ApmInitError):
    """An integration is unknown or could not be instrumented."""

    def __init__(
        self,
        message: str,
        integration: str | None = None,
        severity: ErrorSeverity = ErrorSeverity.CRITICAL,
        **kwargs: Any,
    ):
        context = kwargs.pop("context", None) or {}
        if integration:
            context["integration"] = integration
        kwargs.setdefault("recoverable", False)
        super().__init__(message, severity, context, **kwargs)
