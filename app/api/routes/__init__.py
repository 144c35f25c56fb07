"""
API Routes - Combines all route modules into single router.
"""

from fastapi import APIRouter

from app.api.routes.auth_routes import router as auth_router
from app.api.routes.health_routes import router as health_router
from app.api.routes.resource_routes import build_resource_router
from app.services.mongo_service import RESOURCES

# Main API router
api_router = APIRouter()

# Include all sub-routers
api_router.include_router(health_router)
api_router.include_router(auth_router)
for resource in RESOURCES.values():
    api_router.include_router(build_resource_router(resource))
