"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

from ...config import settings
from ...services.locations import get_location_store

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {"status": "ok"}


@router.get("/health/store", status_code=status.HTTP_200_OK)
def health_store() -> dict:
    """Report where locations are kept and how many are saved."""
    return {
        "persistent": settings.locations_file is not None,
        "locations_file": str(settings.locations_file) if settings.locations_file else None,
        "locations": len(get_location_store()),
        "distance_metric": settings.distance_metric,
    }
