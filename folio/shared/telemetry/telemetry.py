"""OpenTelemetry tracing configuration for Firestore client calls.

Exporters: console (development), otlp (gRPC collector) or none.
"""

import logging

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.logging import LoggingInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, SERVICE_VERSION, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
from opentelemetry.sdk.trace.sampling import TraceIdRatioBased

from folio.core.config import Settings

logger = logging.getLogger(__name__)


class TelemetryConfig:
    """OpenTelemetry configuration for distributed tracing."""

    def __init__(
        self,
        service_name: str,
        service_version: str,
        enabled: bool = True,
        environment: str = "development",
    ) -> None:
        self.service_name = service_name
        self.service_version = service_version
        self.enabled = enabled
        self.environment = environment
        self.tracer_provider: TracerProvider | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "TelemetryConfig":
        """Build a config from application settings (exporter is chosen in setup_telemetry)."""
        return cls(
            service_name=settings.app_name,
            service_version=settings.app_version,
            enabled=settings.telemetry_enabled,
            environment=settings.telemetry_environment,
        )

    def setup_telemetry(
        self,
        exporter_type: str = "console",
        otlp_endpoint: str | None = None,
        sample_rate: float = 1.0,
    ) -> TracerProvider | None:
        """Initialize OpenTelemetry tracing and set the global tracer provider.

        Args:
            exporter_type: "console", "otlp", or "none".
            otlp_endpoint: OTLP gRPC endpoint (e.g. http://localhost:4317).
            sample_rate: Sampling rate 0.0-1.0.

        Returns:
            TracerProvider or None if disabled.
        """
        if not self.enabled:
            logger.info("Telemetry disabled")
            return None
        try:
            resource = Resource(
                attributes={
                    SERVICE_NAME: self.service_name,
                    SERVICE_VERSION: self.service_version,
                    "deployment.environment": self.environment,
                }
            )
            sampler = TraceIdRatioBased(sample_rate)
            self.tracer_provider = TracerProvider(resource=resource, sampler=sampler)

            if exporter_type == "console":
                exporter = ConsoleSpanExporter()
                logger.info("Using Console span exporter (development mode)")
            elif exporter_type == "otlp" and otlp_endpoint:
                use_insecure = otlp_endpoint.startswith("http://")
                exporter = OTLPSpanExporter(
                    endpoint=otlp_endpoint, insecure=use_insecure
                )
                logger.info("Using OTLP span exporter: %s", otlp_endpoint)
            elif exporter_type == "none":
                logger.info("Telemetry enabled but no exporter configured")
                trace.set_tracer_provider(self.tracer_provider)
                return self.tracer_provider
            else:
                logger.warning(
                    "Unknown exporter type '%s', using console", exporter_type
                )
                exporter = ConsoleSpanExporter()

            self.tracer_provider.add_span_processor(BatchSpanProcessor(exporter))
            trace.set_tracer_provider(self.tracer_provider)
            logger.info(
                "OpenTelemetry initialized: service=%s, version=%s, exporter=%s",
                self.service_name,
                self.service_version,
                exporter_type,
            )
            return self.tracer_provider
        except Exception as e:
            logger.exception("Failed to initialize telemetry: %s", e)
            return None

    def instrument_logging(self) -> None:
        """Instrument Python logging with trace context (trace_id, span_id)."""
        if not self.enabled or not self.tracer_provider:
            return
        try:
            LoggingInstrumentor().instrument(
                tracer_provider=self.tracer_provider,
                set_logging_format=True,
            )
            logger.info("Logging instrumentation enabled")
        except Exception as e:
            logger.exception("Failed to instrument logging: %s", e)

    def shutdown(self) -> None:
        """Shutdown tracer provider and flush remaining spans."""
        if self.tracer_provider:
            try:
                self.tracer_provider.shutdown()
                logger.info("Telemetry shutdown complete")
            except Exception as e:
                logger.exception("Error during telemetry shutdown: %s", e)

