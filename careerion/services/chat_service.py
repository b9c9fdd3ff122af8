"""
Chat Service - the /api/chat decision flow.

    classifier ──no──> redirect message (no AI call)
        │yes (or expectJson)
    prompt builder (+ caller profile when known)
        │
    history usable? ──yes──> stateful chat ──fails──> single-shot
        │no                                               │
    single-shot <──────────────────────────────────────────┘
        │
    expectJson? ──> JSON extraction (never fatal)

Gateway failures surface as UpstreamServiceError with a message picked by
describe_ai_error().
"""

import logging
from typing import Any, Dict, List, Optional, Protocol

from careerion.core.errors import UpstreamServiceError
from careerion.services.prompt_builder import REDIRECT_MESSAGE, build_career_prompt
from careerion.services.relevance import RelevancePredicate, is_career_related
from careerion.utils.json_utils import extract_json

logger = logging.getLogger(__name__)


class AIGateway(Protocol):
    model_name: str

    def generate(self, prompt: str) -> str: ...

    def chat(self, history: List[Dict], prompt: str) -> str: ...


# ============================================================
# ERROR MESSAGES
# ============================================================

GENERIC_AI_ERROR = "Failed to get response from AI. Check server logs."

_AI_ERROR_HINTS = (
    ("API_KEY", "Invalid API key. Please check your Gemini API key configuration."),
    ("quota", "API quota exceeded. Please try again later."),
    ("model", "Invalid model specified. Please check the model configuration."),
)


def describe_ai_error(error: Exception) -> str:
    """Human-readable message for a gateway failure, chosen by substring."""
    text = str(error) or ""
    for needle, message in _AI_ERROR_HINTS:
        if needle in text:
            return message
    return GENERIC_AI_ERROR


# ============================================================
# HISTORY
# ============================================================

def to_gateway_history(history: Optional[List[Any]]) -> List[Dict]:
    """
    Drop malformed entries and convert {sender, text} pairs to Gemini turns.
    The caller's turns ('user') keep the user role, everything else is 'model'.
    """
    turns = []
    for entry in history or []:
        if not isinstance(entry, dict):
            continue
        sender, text = entry.get("sender"), entry.get("text")
        if not sender or not text:
            continue
        turns.append({
            "role": "user" if sender == "user" else "model",
            "parts": [{"text": str(text)}],
        })
    return turns


# ============================================================
# SERVICE
# ============================================================

class ChatService:
    """
    One instance per request. The gateway and the relevance predicate are
    injected so tests can swap both.
    """

    def __init__(self, gateway: AIGateway, classifier: RelevancePredicate = is_career_related):
        self.gateway = gateway
        self.classifier = classifier

    @property
    def model_name(self) -> str:
        return getattr(self.gateway, "model_name", "")

    def _envelope(self, text: str, parsed: Any = None) -> Dict[str, Any]:
        return {"response": text, "modelUsed": self.model_name, "json": parsed}

    # Strategy B
    def _single_shot(self, prompt: str) -> str:
        return self.gateway.generate(prompt)

    # Strategy A
    def _with_history(self, history: List[Dict], prompt: str) -> str:
        return self.gateway.chat(history, prompt)

    def _generate(self, prompt: str, history: Optional[List[Any]]) -> str:
        if not history:
            return self._single_shot(prompt)

        turns = to_gateway_history(history)
        if not turns or turns[0]["role"] != "user":
            # Gemini rejects histories that open with a model turn
            logger.warning("History does not start with a user turn, using single-shot generation")
            return self._single_shot(prompt)

        try:
            return self._with_history(turns, prompt)
        except Exception as e:
            logger.warning("Chat history call failed, falling back to single-shot: %s", e)
            return self._single_shot(prompt)

    def reply(
        self,
        message: Optional[str],
        history: Optional[List[Any]] = None,
        system_prompt: Optional[str] = None,
        expect_json: bool = False,
        profile: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """
        Produce the /api/chat response envelope {response, modelUsed, json}.

        Raises UpstreamServiceError if the gateway fails on every path.
        """
        if not expect_json and not self.classifier(message):
            return self._envelope(REDIRECT_MESSAGE)

        prompt = build_career_prompt(
            message or "",
            profile=profile,
            system_prompt=system_prompt,
            expect_json=expect_json,
        )

        try:
            text = self._generate(prompt, history)
        except Exception as e:
            logger.error("Gemini call failed with model %s: %s", self.model_name, e)
            raise UpstreamServiceError(describe_ai_error(e))

        parsed = None
        if expect_json:
            parsed = extract_json(text)
            if parsed is None:
                logger.warning("Failed to parse JSON from model response: %s", text)
        return self._envelope(text, parsed)
