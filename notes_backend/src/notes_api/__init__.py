"""Personal notes backend: JWT auth and per-user note CRUD over FastAPI."""

__version__ = "1.0.0"
