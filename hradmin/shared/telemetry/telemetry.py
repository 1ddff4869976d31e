"""OpenTelemetry tracing setup.

Spans cover HTTP requests (FastAPI instrumentation) and the @traced
repository reads; cache hits and misses are span events. Log records get
trace ids through the logging instrumentation. Console export for local
runs, OTLP gRPC for a collector.
"""

import logging

from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.logging import LoggingInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, SERVICE_VERSION, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    ConsoleSpanExporter,
    SpanExporter,
)
from opentelemetry.sdk.trace.sampling import TraceIdRatioBased

from hradmin.core.config import Settings

logger = logging.getLogger(__name__)


def _exporter(exporter_type: str, otlp_endpoint: str | None) -> SpanExporter | None:
    if exporter_type == "none":
        return None
    if exporter_type == "otlp":
        if otlp_endpoint:
            return OTLPSpanExporter(
                endpoint=otlp_endpoint, insecure=otlp_endpoint.startswith("http://")
            )
        logger.warning("OTLP exporter selected without an endpoint, using console")
    elif exporter_type != "console":
        logger.warning("Unknown exporter type '%s', using console", exporter_type)
    return ConsoleSpanExporter()


class TelemetryConfig:
    """Owns the tracer provider for one application instance."""

    def __init__(
        self,
        service_name: str,
        service_version: str,
        environment: str = "development",
    ) -> None:
        self.service_name = service_name
        self.service_version = service_version
        self.environment = environment
        self.tracer_provider: TracerProvider | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "TelemetryConfig":
        return cls(settings.app_name, settings.app_version, settings.telemetry_environment)

    def setup_telemetry(
        self,
        exporter_type: str = "console",
        otlp_endpoint: str | None = None,
        sample_rate: float = 1.0,
    ) -> TracerProvider | None:
        """Create the tracer provider and install it globally.

        Args:
            exporter_type: "console", "otlp" or "none" (spans are sampled but not exported).
            otlp_endpoint: OTLP gRPC endpoint, e.g. http://localhost:4317.
            sample_rate: Fraction of traces kept, 0.0 to 1.0.

        Returns:
            The provider, or None when setup failed (the app runs untraced).
        """
        try:
            provider = TracerProvider(
                resource=Resource(
                    attributes={
                        SERVICE_NAME: self.service_name,
                        SERVICE_VERSION: self.service_version,
                        "deployment.environment": self.environment,
                    }
                ),
                sampler=TraceIdRatioBased(sample_rate),
            )
            exporter = _exporter(exporter_type, otlp_endpoint)
            if exporter is not None:
                provider.add_span_processor(BatchSpanProcessor(exporter))
            trace.set_tracer_provider(provider)
        except Exception:
            logger.exception("Telemetry setup failed; continuing without tracing")
            return None
        self.tracer_provider = provider
        logger.info(
            "Tracing enabled for %s %s (exporter=%s, sample_rate=%s)",
            self.service_name,
            self.service_version,
            exporter_type,
            sample_rate,
        )
        return provider

    def instrument_fastapi(self, app: FastAPI) -> None:
        """Trace every request except health checks; add trace ids to log records."""
        if self.tracer_provider is None:
            return
        FastAPIInstrumentor.instrument_app(
            app, tracer_provider=self.tracer_provider, excluded_urls="/api/v1/health"
        )
        LoggingInstrumentor().instrument(tracer_provider=self.tracer_provider)

    def shutdown(self) -> None:
        """Flush pending spans and stop the provider."""
        if self.tracer_provider is not None:
            self.tracer_provider.shutdown()
            self.tracer_provider = None
