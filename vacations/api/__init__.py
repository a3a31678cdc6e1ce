"""HTTP adapter (FastAPI): auth + vacaciones bajo /v1."""
