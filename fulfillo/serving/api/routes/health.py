"""
Health Check Endpoints

Provides health and readiness checks for orchestration systems.
"""

from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from fulfillo.config import Settings
from fulfillo.serving.api.dependencies import get_app_settings, get_store
from fulfillo.store import DashboardStore

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response"""
    status: str
    version: str
    environment: str
    timestamp: datetime
    checks: Dict[str, Any]


@router.get("/health", response_model=HealthResponse)
async def health_check(
    settings: Settings = Depends(get_app_settings),
    store: DashboardStore = Depends(get_store),
) -> HealthResponse:
    """
    Health check endpoint.

    Reports the size of each in-memory collection and the journal.
    """
    checks = {
        "store": {
            "status": "healthy",
            "users": len(store.users),
            "brands": len(store.brands),
            "orders": len(store.orders),
            "inventory": len(store.inventory),
            "inquiries": len(store.inquiries),
            "journal": len(store.journal),
        },
    }

    return HealthResponse(
        status="healthy",
        version=settings.version,
        environment=settings.app_env,
        timestamp=datetime.now(timezone.utc),
        checks=checks,
    )


@router.get("/health/live")
async def liveness_check() -> Dict[str, str]:
    """
    Liveness probe endpoint.

    Returns 200 if the application is running.
    """
    return {"status": "alive"}


@router.get("/health/ready")
async def readiness_check() -> Dict[str, str]:
    """The store is built with the app, so a running app is ready"""
    return {"status": "ready"}
