"""
Google Gemini API Client

The AI gateway for chat and career recommendations. Two entry points:
- generate(prompt): single-shot generation
- chat(history, prompt): stateful chat session seeded with prior turns

History entries use Gemini's shape: {"role": "user" | "model", "parts": [{"text": ...}]}.
Gemini requires the first history turn to come from the user.
"""
import logging
from functools import lru_cache
from typing import Dict, List

import google.generativeai as genai
from fastapi import Depends

from careerion.core.config import Settings, get_settings
from careerion.core.errors import ConfigurationError

logger = logging.getLogger(__name__)

MISSING_KEY_MESSAGE = "GEMINI_API_KEY is not configured on the server."


class GeminiClient:
    """
    Wrapper for the Gemini API.
    """

    def __init__(self, api_key: str, model_name: str):
        genai.configure(api_key=api_key)
        self.model_name = model_name
        self.model = genai.GenerativeModel(model_name)

    def generate(self, prompt: str) -> str:
        """Single prompt in, text out."""
        response = self.model.generate_content(prompt)
        return response.text

    def chat(self, history: List[Dict], prompt: str) -> str:
        """Send prompt into a chat session that already holds history."""
        session = self.model.start_chat(history=history)
        response = session.send_message(prompt)
        return response.text

    def test_connection(self) -> bool:
        """Test if Gemini API is reachable"""
        try:
            return "OK" in self.generate("Reply with exactly: OK").upper()
        except Exception as e:
            logger.error("Gemini connection failed: %s", e)
            return False


@lru_cache()
def _build_client(api_key: str, model_name: str) -> GeminiClient:
    logger.info("Using Gemini model: %s", model_name)
    return GeminiClient(api_key=api_key, model_name=model_name)


def get_gemini_client(settings: Settings = None) -> GeminiClient:
    """Get or create Gemini client (one per key/model pair)"""
    settings = settings or get_settings()
    if not settings.gemini_api_key:
        raise ConfigurationError(MISSING_KEY_MESSAGE)
    return _build_client(settings.gemini_api_key, settings.model_name)


def get_ai_gateway(settings: Settings = Depends(get_settings)) -> GeminiClient:
    """
    Dependency for FastAPI route injection. Raises ConfigurationError (500)
    per request while the key is missing; the server keeps running.
    """
    return get_gemini_client(settings)
