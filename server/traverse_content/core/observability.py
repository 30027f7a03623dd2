"""Observability setup for structured logging, Prometheus metrics and tracing."""

import logging

import structlog
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from prometheus_client import CollectorRegistry, Counter, Histogram, generate_latest

from .config import settings

SERVICE_NAME = "traverse-content"

# Prometheus metrics
REGISTRY = CollectorRegistry()

REQUEST_COUNT = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status_code"],
    registry=REGISTRY,
)

REQUEST_DURATION = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    registry=REGISTRY,
)

ENTRIES_CREATED = Counter(
    "content_entries_created_total",
    "Content entries created",
    ["content_type"],
    registry=REGISTRY,
)

MEDIA_FILES = Counter(
    "media_files_total",
    "Media files resolved by the uploader",
    ["outcome"],
    registry=REGISTRY,
)

PERMISSIONS_GRANTED = Counter(
    "permissions_granted_total",
    "Permissions granted to roles",
    ["role"],
    registry=REGISTRY,
)


def setup_structured_logging(level: str | None = None) -> None:
    """Configure structlog and the stdlib root logger."""
    level_name = level or settings.log_level
    numeric_level = getattr(logging, level_name)

    def add_trace_context(logger, method_name, event_dict):
        """Add trace context to log events."""
        span = trace.get_current_span()
        if span and span.is_recording():
            ctx = span.get_span_context()
            event_dict["trace_id"] = format(ctx.trace_id, "032x")
            event_dict["span_id"] = format(ctx.span_id, "016x")
        return event_dict

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            add_trace_context,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer() if settings.debug else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def setup_tracing(app_name: str = SERVICE_NAME):
    """Setup OpenTelemetry tracing; export only when an OTLP endpoint is configured."""
    resource = Resource.create({
        "service.name": app_name,
        "service.version": "1.0.0",
        "environment": settings.environment,
    })

    provider = TracerProvider(resource=resource)
    if settings.otlp_endpoint:
        provider.add_span_processor(BatchSpanProcessor(OTLPSpanExporter(endpoint=settings.otlp_endpoint)))
    trace.set_tracer_provider(provider)

    return trace.get_tracer(__name__)


def instrument_fastapi(app):
    """Instrument FastAPI with OpenTelemetry."""
    FastAPIInstrumentor.instrument_app(app)


def instrument_sqlalchemy(engine):
    """Instrument the async engine's sync core with OpenTelemetry."""
    SQLAlchemyInstrumentor().instrument(engine=engine.sync_engine)


class MetricsCollector:
    """Collector for content metrics."""

    @staticmethod
    def record_entry_created(content_type: str):
        ENTRIES_CREATED.labels(content_type=content_type).inc()

    @staticmethod
    def record_media_file(outcome: str):
        """Record a media file as "uploaded" or "reused"."""
        MEDIA_FILES.labels(outcome=outcome).inc()

    @staticmethod
    def record_permissions_granted(role: str, count: int):
        PERMISSIONS_GRANTED.labels(role=role).inc(count)


def get_prometheus_metrics():
    """Get Prometheus metrics for the /metrics endpoint."""
    return generate_latest(REGISTRY)


# Global metrics collector instance
metrics_collector = MetricsCollector()


def get_logger(name: str):
    """Get a structlog logger bound to a component name."""
    return structlog.get_logger(component=name)
