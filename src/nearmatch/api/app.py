# src/nearmatch/api/app.py
"""
FastAPI application wiring.

This file creates the `FastAPI` instance, installs CORS and serves the static
root/health endpoints. Business logic lives in `nearmatch.services`.
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse, Response
from starlette.middleware.cors import CORSMiddleware

from nearmatch.config.settings import get_settings
from nearmatch.core.logging import configure_logging

from .routes import router

configure_logging()

settings = get_settings()

app = FastAPI(title=f"{settings.app.name} API", version="0.1.0")

# Mobile clients and local web builds call the API from arbitrary origins.
# Configure via env: NEARMATCH_CORS_ORIGINS="https://app.example.com,http://localhost:8081"
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors.allow_origins,
    allow_credentials=False,
    allow_methods=settings.cors.allow_methods,
    allow_headers=settings.cors.allow_headers,
)

app.include_router(router)


@app.get("/", response_class=PlainTextResponse)
def index() -> str:
    return settings.app.greeting


@app.get("/health")
def health() -> dict:
    """Liveness probe."""
    return {"status": "ok", "message": settings.app.health_message}


@app.options("/{path:path}", include_in_schema=False)
def options_fallback(path: str) -> Response:
    """Answer bare OPTIONS requests; real CORS preflights are handled by the middleware."""
    return Response(status_code=200)
