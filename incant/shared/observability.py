# incant/shared/observability.py
from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

from incant.shared.config import settings

_provider = None


def setup_telemetry() -> TracerProvider:
    """
    Configures the global OpenTelemetry tracer provider once per process.

    Spans are only exported when OTEL_CONSOLE_EXPORT is set; otherwise the
    provider exists to generate Trace IDs for the logs.
    """
    global _provider
    if _provider is not None:
        return _provider

    resource = Resource.create(attributes={
        "service.name": settings.OTEL_SERVICE_NAME,
        "service.environment": settings.APP_ENV.value,
    })
    provider = TracerProvider(resource=resource)

    if settings.OTEL_CONSOLE_EXPORT:
        provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))

    trace.set_tracer_provider(provider)
    _provider = provider
    return provider


def setup_observability(app: FastAPI):
    """
    Sets the tracer provider and auto-instruments the FastAPI application
    to trace all HTTP requests.
    """
    provider = setup_telemetry()
    FastAPIInstrumentor.instrument_app(app, tracer_provider=provider)


def get_tracer(name: str):
    """
    Utility to get a tracer for manual instrumentation in Use Cases.
    Usage:
        tracer = get_tracer(__name__)
        with tracer.start_as_current_span("my_custom_logic"):
            ...
    """
    return trace.get_tracer(name)
