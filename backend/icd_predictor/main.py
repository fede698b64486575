"""FastAPI application for the ICD-10 Code Predictor."""

import logging
import time
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from icd_predictor import __version__
from icd_predictor.api import predict_router
from icd_predictor.core.config import settings
from icd_predictor.core.logging import configure_logging
from icd_predictor.services.icd10_matcher import get_icd10_matcher_service

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Configures logging and pre-warms the matcher service so the reference
    table is ready before the first request.
    """
    startup_start = time.perf_counter()
    configure_logging(settings.log_level)

    matcher_stats = get_icd10_matcher_service().get_stats()
    logger.info(f"ICD-10 matcher ready: {matcher_stats['total_references']} reference diagnoses")

    total_startup_ms = (time.perf_counter() - startup_start) * 1000
    logger.info(f"Server ready - total startup time: {total_startup_ms:.0f}ms")

    app.state.matcher_stats = matcher_stats
    app.state.startup_time_ms = total_startup_ms

    yield


app = FastAPI(
    title="ICD-10 Code Predictor",
    description="API for predicting ICD-10 billing codes from medical diagnosis text using keyword matching.",
    version=__version__,
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(predict_router)


@app.get("/health", tags=["Health"])
async def health_check() -> dict[str, Any]:
    """Health check endpoint (liveness probe).

    Use /ready for readiness checks.
    """
    return {
        "status": "healthy",
        "service": "icd-code-predictor",
        "version": __version__,
        "timestamp": datetime.now(UTC).isoformat(),
    }


@app.get("/ready", tags=["Health"])
async def readiness_check() -> dict[str, Any]:
    """Readiness check endpoint.

    Confirms the matcher service is loaded.
    """
    return {
        "status": "ready",
        "service": "icd-code-predictor",
        "version": __version__,
        "timestamp": datetime.now(UTC).isoformat(),
        "startup_time_ms": getattr(app.state, "startup_time_ms", 0),
        "matcher": get_icd10_matcher_service().get_stats(),
    }


@app.get("/", tags=["Health"])
async def root() -> dict[str, str]:
    """Root endpoint with API info."""
    return {
        "service": "ICD-10 Code Predictor API",
        "version": __version__,
        "docs": "/docs",
        "health": "/health",
        "ready": "/ready",
        "predict": "/predict-icd",
    }
