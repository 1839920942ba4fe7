"""
Tracing setup on top of OpenTelemetry.

Owns the tracer provider built from a TracingSettings record and the
instrumentors enabled for it.
"""

from typing import TYPE_CHECKING, List, Optional

from loguru import logger
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.instrumentor import BaseInstrumentor
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

from ..config import TracingConfig
from ..core.exceptions import ConfigurationError, InstrumentationError
from .integrations import get_integration

if TYPE_CHECKING:
    from ..settings import TracingSettings


class TracingManager:
    """Manages the tracer provider and library instrumentation."""

    def __init__(self, settings: "TracingSettings", config: Optional[TracingConfig] = None):
        """
        Initialize tracing manager.

        Args:
            settings: Frozen tracing settings
            config: Exporter configuration (defaults to no exporters)
        """
        self.settings = settings
        self.config = config or TracingConfig()
        self.tracer_provider: Optional[TracerProvider] = None
        self.tracer = None
        self._instrumentors: List[BaseInstrumentor] = []
        self._enabled: List[str] = []

    @property
    def is_setup(self) -> bool:
        return self.tracer_provider is not None

    def setup_tracing(self) -> TracerProvider:
        """
        Build the tracer provider and instrument the enabled integrations.

        Calling this again on a manager that is already set up is a no-op.

        Returns:
            The tracer provider

        Raises:
            ConfigurationError: if an exporter cannot be created
            InstrumentationError: if an integration cannot be instrumented
        """
        if self.tracer_provider is not None:
            return self.tracer_provider

        resource = Resource.create(
            {
                "service.name": self.settings.service_name,
                "service.version": self.config.service_version,
                "deployment.environment": self.settings.environment,
            }
        )
        provider = TracerProvider(resource=resource)

        try:
            self._setup_exporters(provider)
            self._setup_instrumentation(provider)
        except Exception:
            self._uninstrument_all()
            provider.shutdown()
            raise

        self.tracer_provider = provider
        self.tracer = provider.get_tracer(__name__)

        logger.info(
            f"Tracing initialized for service {self.settings.service_name} "
            f"({self.settings.environment}) with integrations: {', '.join(self._enabled)}"
        )
        return provider

    def _setup_exporters(self, provider: TracerProvider):
        """Attach span exporters enabled in configuration."""
        exporters = self.config.exporters

        if exporters.otlp.enabled:
            try:
                otlp_exporter = OTLPSpanExporter(
                    endpoint=exporters.otlp.endpoint,
                    headers=exporters.otlp.headers or None,
                    insecure=exporters.otlp.insecure,
                )
            except Exception as e:
                logger.error(f"Failed to create OTLP exporter: {e}")
                raise ConfigurationError(
                    f"Invalid OTLP exporter configuration: {e}",
                    config_key="exporters.otlp",
                ) from e
            provider.add_span_processor(BatchSpanProcessor(otlp_exporter))
            logger.info(f"OTLP exporter configured for {exporters.otlp.endpoint}")

        if exporters.console.enabled:
            provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))
            logger.info("Console exporter configured")

    def _setup_instrumentation(self, provider: TracerProvider):
        """Instrument every integration named in the settings."""
        for name in sorted(self.settings.instrumentations):
            integration = get_integration(name)
            instrumentor = integration.create_instrumentor()

            if instrumentor.is_instrumented_by_opentelemetry:
                # Bound to another provider; its spans do not reach this one
                logger.warning(f"{name} already instrumented elsewhere, skipping")
                continue

            try:
                instrumentor.instrument(tracer_provider=provider)
            except Exception as e:
                logger.error(f"Failed to instrument {name}: {e}")
                raise InstrumentationError(
                    f"Failed to instrument {name}: {e}", integration=name
                ) from e

            # instrument() reports dependency conflicts by logging, not raising
            if not instrumentor.is_instrumented_by_opentelemetry:
                raise InstrumentationError(
                    f"{name} instrumentation did not activate", integration=name
                )

            self._instrumentors.append(instrumentor)
            self._enabled.append(name)
            logger.info(f"{name} instrumentation enabled")

    def enabled_integrations(self) -> List[str]:
        """Names of the integrations active for this manager, sorted."""
        return sorted(self._enabled)

    def _uninstrument_all(self):
        """Undo every instrumentation this manager activated."""
        for instrumentor in self._instrumentors:
            try:
                instrumentor.uninstrument()
            except Exception as e:
                logger.warning(f"Failed to uninstrument: {e}")
        self._instrumentors.clear()
        self._enabled.clear()

    def shutdown(self):
        """Uninstrument libraries and shut the tracer provider down."""
        self._uninstrument_all()

        if self.tracer_provider:
            self.tracer_provider.shutdown()
            self.tracer_provider = None
            self.tracer = None

        logger.info("Tracing shutdown completed")
