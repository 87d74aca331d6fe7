from fastapi import FastAPI

from .src.routers import events
from .src.config import settings
from .otel import init_tracing

app = FastAPI(title="Pub/Sub Greeter", version="1.0.0")

# Routers
app.include_router(events.router)

tracer = init_tracing(app, service_name=settings.service_name, service_version="v1")

@app.get("/health")
def health():
    return {"status": "ok", "service": settings.service_name}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.port)
