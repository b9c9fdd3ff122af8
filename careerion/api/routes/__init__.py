"""
API Routes - Combines all route modules into single router.
"""

from fastapi import APIRouter

from careerion.api.routes.auth_routes import router as auth_router
from careerion.api.routes.user_routes import router as user_router
from careerion.api.routes.chat_routes import router as chat_router
from careerion.api.routes.admin_routes import router as admin_router
from careerion.api.routes.health_routes import router as health_router

# Main API router
api_router = APIRouter()

# Include all sub-routers
api_router.include_router(auth_router)
api_router.include_router(user_router)
api_router.include_router(chat_router)
api_router.include_router(admin_router)
api_router.include_router(health_router)
