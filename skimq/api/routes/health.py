"""Health check endpoints for SkimQ API.

- /health - Service health and version
- /health/telemetry - In-memory counters (no PII)
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from fastapi import APIRouter

from skimq.config import APP_ENV, APP_NAME, APP_VERSION
from skimq.observability.telemetry import snapshot

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check() -> dict[str, Any]:
    """Health check endpoint. The pipeline has no backing services to check."""
    return {
        "status": "healthy",
        "service": APP_NAME,
        "version": APP_VERSION,
        "environment": APP_ENV,
        "timestamp": datetime.now(UTC).isoformat(),
    }


@router.get("/health/telemetry")
async def telemetry_stats() -> dict[str, Any]:
    """Aggregate pipeline counters for debugging. Contains no PII."""
    return snapshot()
