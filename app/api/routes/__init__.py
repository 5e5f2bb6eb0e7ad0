"""
API Routes - Combines all route modules into single router.
"""

from fastapi import APIRouter

from app.api.routes.auth_routes import router as auth_router
from app.api.routes.lead_routes import router as lead_router
from app.api.routes.candidate_routes import router as candidate_router
from app.api.routes.service_routes import router as service_router

# Main API router
api_router = APIRouter()

# Include all sub-routers
api_router.include_router(auth_router)
api_router.include_router(lead_router)
api_router.include_router(candidate_router)
api_router.include_router(service_router)
