"""
Process-startup entry point for APM tracing.

Call ``configure_tracing()`` once, before the web application is created,
so the framework and cache client are patched before first use.
"""

from typing import Callable, Optional

from opentelemetry import trace

from .config import TracingConfig
from .settings import build_settings
from .tracing.tracer import TracingManager

# Global tracing manager instance
_tracing_manager: Optional[TracingManager] = None


def configure_tracing(
    config: Optional[TracingConfig] = None,
    probe: Optional[Callable[[str], bool]] = None,
    set_global: bool = True,
) -> TracingManager:
    """
    Build the tracing settings and set up the process-wide manager.

    Subsequent calls return the existing manager unchanged. Errors are not
    handled here; they are meant to abort process startup.

    Args:
        config: Exporter and logging configuration
        probe: Presence check for optional integrations
        set_global: Register the provider as the global tracer provider

    Returns:
        The process-wide TracingManager
    """
    global _tracing_manager

    if _tracing_manager is None:
        manager = TracingManager(build_settings(probe), config)
        manager.setup_tracing()
        if set_global:
            # OpenTelemetry only honours the first global provider per process
            trace.set_tracer_provider(manager.tracer_provider)
        _tracing_manager = manager

    return _tracing_manager


def get_tracing_manager() -> Optional[TracingManager]:
    """Return the process-wide manager, or None if not configured."""
    return _tracing_manager


def get_tracer(name: str = __name__):
    """
    Get a tracer from the process-wide provider.

    Returns:
        Tracer instance or None if tracing is not configured
    """
    if _tracing_manager is None or _tracing_manager.tracer_provider is None:
        return None
    return _tracing_manager.tracer_provider.get_tracer(name)


def shutdown_tracing():
    """Shutdown the process-wide manager."""
    global _tracing_manager

    if _tracing_manager:
        _tracing_manager.shutdown()
        _tracing_manager = None
