"""
Health Route

GET /health - Liveness check (no auth)
"""

from fastapi import APIRouter

from app.core.config import get_settings
from app.schemas.schemas import HealthResponse

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse)
async def health_check():
    return HealthResponse(status="ok", message=f"{get_settings().app_name} API is running")
