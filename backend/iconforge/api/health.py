"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from iconforge.generators import get_registry
from iconforge.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(status="ok", version="0.1.0", targets_registered=get_registry().count)
