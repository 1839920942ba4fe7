"""
Registry of the tracing integrations this service knows how to enable.

Each integration names the client class whose presence gates it and a
factory for the OpenTelemetry instrumentor that patches that library.
"""

import importlib
from dataclasses import dataclass
from typing import Callable, Dict

from loguru import logger
from opentelemetry.instrumentation.instrumentor import BaseInstrumentor

from ..core.exceptions import InstrumentationError


def _flask_instrumentor() -> BaseInstrumentor:
    from opentelemetry.instrumentation.flask import FlaskInstrumentor

    return FlaskInstrumentor()


def _redis_instrumentor() -> BaseInstrumentor:
    from opentelemetry.instrumentation.redis import RedisInstrumentor

    return RedisInstrumentor()


@dataclass(frozen=True)
class Integration:
    """A named library integration."""

    name: str
    module: str
    class_name: str
    instrumentor_factory: Callable[[], BaseInstrumentor]
    always_on: bool = False

    def create_instrumentor(self) -> BaseInstrumentor:
        return self.instrumentor_factory()


FLASK = "flask"
REDIS = "redis"

INTEGRATIONS: Dict[str, Integration] = {
    FLASK: Integration(
        name=FLASK,
        module="flask",
        class_name="Flask",
        instrumentor_factory=_flask_instrumentor,
        always_on=True,
    ),
    REDIS: Integration(
        name=REDIS,
        module="redis",
        class_name="Redis",
        instrumentor_factory=_redis_instrumentor,
    ),
}


def get_integration(name: str) -> Integration:
    """
    Look up an integration by name.

    Raises:
        InstrumentationError: if no integration is registered under ``name``
    """
    try:
        return INTEGRATIONS[name]
    except KeyError:
        raise InstrumentationError(
            f"Unknown tracing integration: {name}", integration=name
        ) from None


def integration_available(name: str) -> bool:
    """
    Check whether the client class gating an integration can be loaded.

    Args:
        name: Integration name

    Returns:
        True if the gating module imports and defines the client class
    """
    integration = get_integration(name)
    try:
        module = importlib.import_module(integration.module)
    except ImportError:
        logger.debug(f"Module '{integration.module}' not importable")
        return False

    return isinstance(getattr(module, integration.class_name, None), type)
