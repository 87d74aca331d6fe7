from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor

from .src.config import settings

def init_tracing(app, service_name: str, service_version: str = "v1"):
    if not settings.tracing_enabled:
        return trace.get_tracer(service_name)

    resource = Resource.create({
        "service.name": service_name,
        "service.version": service_version,
        "deployment.environment": settings.environment,
    })
    provider = TracerProvider(resource=resource)
    if settings.use_cloud_trace:
        # pip: opentelemetry-exporter-gcp-trace (the "gcp" extra)
        from opentelemetry.exporter.cloud_trace import CloudTraceSpanExporter
        exporter = CloudTraceSpanExporter()
    else:
        exporter = ConsoleSpanExporter()

    provider.add_span_processor(BatchSpanProcessor(exporter))
    trace.set_tracer_provider(provider)

    # Auto-instrument the app
    FastAPIInstrumentor().instrument_app(app)

    return trace.get_tracer(service_name)
