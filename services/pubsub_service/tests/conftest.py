import os

# Settings are read at import time; keep span export off stdout during tests
os.environ.setdefault("TRACING_ENABLED", "false")
