"""
Health Route

GET /health - Liveness plus AI configuration status
"""

from fastapi import APIRouter, Depends

from careerion.core.config import Settings, get_settings
from careerion.schemas.schemas import HealthResponse

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_settings)):
    return HealthResponse(
        status="ok",
        geminiKeyPresent=bool(settings.gemini_api_key),
        modelConfigured=settings.model_name
    )
