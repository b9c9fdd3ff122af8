"""
AI Routes

POST /chat - Career assistant chat (open; personalized when a valid token is sent)
POST /career-recommendations - Long-form personalized recommendations (auth required)

Both handlers are plain def: the Gemini SDK blocks, so they run in the threadpool.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends

from careerion.api.deps import get_chat_service, get_user_service
from careerion.core.auth import get_current_user, get_optional_user
from careerion.core.errors import UpstreamServiceError, ValidationError
from careerion.schemas.schemas import ChatRequest, CareerRecommendationRequest
from careerion.services.chat_service import ChatService
from careerion.services.gemini_client import GeminiClient, get_ai_gateway
from careerion.services.mongo_service import UserService
from careerion.services.prompt_builder import DEFAULT_CATEGORY, build_recommendations_prompt

logger = logging.getLogger(__name__)

router = APIRouter(tags=["AI"])


def _load_profile(users: UserService, user: Optional[dict]) -> Optional[dict]:
    """Best-effort profile lookup; personalization is optional."""
    if not user:
        return None
    try:
        return users.get_profile(user["user_id"])
    except Exception as e:
        logger.info("Could not fetch user profile for personalization: %s", e)
        return None


@router.post("/chat")
def chat(
    request: ChatRequest,
    service: ChatService = Depends(get_chat_service),
    user: Optional[dict] = Depends(get_optional_user),
    users: UserService = Depends(get_user_service)
):
    """
    Answer a career question.

    Off-topic messages get a fixed redirect without calling the model,
    unless the caller asked for JSON (expectJson), which always goes to the model.
    """
    logger.info("Received chat request (expectJson=%s, history=%d)",
                request.expectJson, len(request.history or []))

    return service.reply(
        message=request.message,
        history=request.history,
        system_prompt=request.systemPrompt,
        expect_json=request.expectJson,
        profile=_load_profile(users, user),
    )


@router.post("/career-recommendations")
def career_recommendations(
    request: CareerRecommendationRequest,
    user: dict = Depends(get_current_user),
    gateway: GeminiClient = Depends(get_ai_gateway),
    users: UserService = Depends(get_user_service)
):
    """Detailed recommendations built from the caller's stored profile."""
    if not request.query:
        raise ValidationError("Query is required for career recommendations")

    doc = users.get_by_id(user["user_id"]) or {}
    profile = doc.get("profile") or None
    logger.info("Career recommendations requested by %s", doc.get("email", user["email"]))

    prompt = build_recommendations_prompt(
        request.query,
        name=doc.get("name"),
        profile=profile,
        category=request.category,
    )
    try:
        text = gateway.generate(prompt)
    except Exception as e:
        logger.error("Error generating career recommendations: %s", e)
        raise UpstreamServiceError("Failed to generate career recommendations")

    return {
        "response": text,
        "modelUsed": gateway.model_name,
        "userProfile": "Used for personalization" if profile else "No profile available",
        "category": request.category or DEFAULT_CATEGORY,
    }
