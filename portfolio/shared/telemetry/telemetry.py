"""OpenTelemetry tracing for the search service.

TelemetryConfig.from_settings() builds the tracer provider described by
Settings (console exporter for development, OTLP gRPC for collectors such as
Jaeger or Tempo). instrument_app() adds request spans when the app is built;
instrument() hooks the SQLAlchemy engine the content repositories query
through and the Redis response cache at startup.
Instrumentation failures are logged and never stop the service.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import TYPE_CHECKING

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.redis import RedisInstrumentor
from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, SERVICE_VERSION, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    ConsoleSpanExporter,
    SpanExporter,
)
from opentelemetry.sdk.trace.sampling import ParentBased, TraceIdRatioBased

if TYPE_CHECKING:
    from fastapi import FastAPI
    from sqlalchemy.ext.asyncio import AsyncEngine

    from portfolio.core.config import Settings

logger = logging.getLogger(__name__)

# Probes are polled constantly and carry no search traffic.
EXCLUDED_URLS = "/api/health"


def _build_exporter(exporter_type: str, otlp_endpoint: str | None) -> SpanExporter | None:
    """Exporter for exporter_type; None for "none". Unknown types fall back to console."""
    if exporter_type == "none":
        return None
    if exporter_type == "otlp":
        if otlp_endpoint:
            return OTLPSpanExporter(
                endpoint=otlp_endpoint, insecure=otlp_endpoint.startswith("http://")
            )
        logger.warning("OTLP exporter selected without TELEMETRY_OTLP_ENDPOINT, using console")
    elif exporter_type != "console":
        logger.warning("Unknown exporter type '%s', using console", exporter_type)
    return ConsoleSpanExporter()


class TelemetryConfig:
    """Owns the tracer provider for one process and the instrumentation hooked to it."""

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
    def from_settings(cls, settings: Settings) -> TelemetryConfig:
        """Create and start telemetry as configured (call only when telemetry_enabled)."""
        telemetry = cls(
            service_name=settings.app_name,
            service_version=settings.app_version,
            environment=settings.telemetry_environment,
        )
        telemetry.start(
            exporter_type=settings.telemetry_exporter,
            otlp_endpoint=settings.telemetry_otlp_endpoint,
            sample_rate=settings.telemetry_sample_rate,
        )
        return telemetry

    def start(
        self,
        exporter_type: str = "console",
        otlp_endpoint: str | None = None,
        sample_rate: float = 1.0,
    ) -> None:
        """Install the global tracer provider with a ratio sampler and one exporter."""
        resource = Resource(
            attributes={
                SERVICE_NAME: self.service_name,
                SERVICE_VERSION: self.service_version,
                "deployment.environment": self.environment,
            }
        )
        provider = TracerProvider(
            resource=resource, sampler=ParentBased(TraceIdRatioBased(sample_rate))
        )
        exporter = _build_exporter(exporter_type, otlp_endpoint)
        if exporter is not None:
            provider.add_span_processor(BatchSpanProcessor(exporter))
        trace.set_tracer_provider(provider)
        self.tracer_provider = provider
        logger.info(
            "OpenTelemetry initialized: service=%s version=%s exporter=%s sample_rate=%s",
            self.service_name,
            self.service_version,
            exporter_type,
            sample_rate,
        )

    def instrument(self, engine: AsyncEngine | None = None, redis: bool = False) -> None:
        """Instrument the SQLAlchemy engine and the Redis client when given."""
        if self.tracer_provider is None:
            return
        provider = self.tracer_provider
        hooks: list[tuple[str, Callable[[], object]]] = []
        if engine is not None:
            hooks.append(
                (
                    "SQLAlchemy",
                    lambda: SQLAlchemyInstrumentor().instrument(
                        engine=engine.sync_engine, tracer_provider=provider
                    ),
                )
            )
        if redis:
            hooks.append(
                ("Redis", lambda: RedisInstrumentor().instrument(tracer_provider=provider))
            )
        for name, hook in hooks:
            try:
                hook()
            except Exception:
                logger.exception("Failed to instrument %s", name)
            else:
                logger.info("%s instrumentation enabled", name)

    def shutdown(self) -> None:
        """Flush pending spans and shut the tracer provider down."""
        if self.tracer_provider is None:
            return
        try:
            self.tracer_provider.shutdown()
        except Exception:
            logger.exception("Error during telemetry shutdown")
        else:
            logger.info("Telemetry shutdown complete")
        self.tracer_provider = None


def instrument_app(app: FastAPI) -> None:
    """Add request spans to app. Call before the app starts serving.

    Spans go to the global tracer provider, so they are exported once
    TelemetryConfig.start() has installed one at startup.
    """
    FastAPIInstrumentor.instrument_app(app, excluded_urls=EXCLUDED_URLS)


_telemetry: TelemetryConfig | None = None
_telemetry_lock = threading.RLock()


def get_telemetry() -> TelemetryConfig | None:
    """Return the process telemetry instance (set at startup)."""
    with _telemetry_lock:
        return _telemetry


def set_telemetry(telemetry: TelemetryConfig | None) -> None:
    """Set (or clear, with None) the process telemetry instance."""
    global _telemetry
    with _telemetry_lock:
        _telemetry = telemetry
