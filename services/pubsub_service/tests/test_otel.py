from fastapi import FastAPI

from services.pubsub_service.main import app
from services.pubsub_service.otel import init_tracing
from services.pubsub_service.src.config import settings

def test_tracing_disabled_under_tests():
    assert settings.tracing_enabled is False
    assert not getattr(app, "_is_instrumented_by_opentelemetry", False)

def test_init_tracing_disabled_skips_instrumentation():
    local = FastAPI()
    tracer = init_tracing(local, service_name="tracing-off")
    assert tracer is not None
    assert not getattr(local, "_is_instrumented_by_opentelemetry", False)
