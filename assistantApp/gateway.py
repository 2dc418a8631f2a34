"""
AI gateway: the only place that talks to the language-model provider.

Callers never see the provider SDK. They hand a prompt and
``CompletionOptions`` to a completion client, any object exposing
``complete(prompt, options) -> str``. The client class is configured with the
``AI_CLIENT_CLASS`` setting so tests and local runs can swap in a fake.

Both operations make exactly one completion call. Any failure is logged and
surfaced as ``AIGatewayError`` carrying a generic, user-safe message.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from django.conf import settings
from django.utils.module_loading import import_string

from .prompts import SOIL_SYSTEM_PROMPT, chat_system_prompt, soil_analysis_prompt

logger = logging.getLogger(__name__)

CHAT_MAX_TOKENS = 500
SOIL_MAX_TOKENS = 800

CHAT_FALLBACK = "I apologize, but I couldn't generate a response. Please try again."
SOIL_FALLBACK = "Unable to generate soil analysis"

CHAT_FAILURE = "Failed to get AI response"
SOIL_FAILURE = "Failed to analyze soil"


class AIGatewayError(Exception):
    """The completion provider could not produce an answer."""


@dataclass(frozen=True)
class CompletionOptions:
    system_prompt: str
    max_tokens: int
    model: Optional[str] = None


class OpenAICompletionClient:
    """Completion client backed by the OpenAI chat completions API."""

    def __init__(self, api_key=None, model=None):
        from openai import OpenAI

        self.client = OpenAI(api_key=api_key or settings.OPENAI_API_KEY)
        self.model = model or settings.AI_MODEL

    def complete(self, prompt, options):
        response = self.client.chat.completions.create(
            model=options.model or self.model,
            messages=[
                {"role": "system", "content": options.system_prompt},
                {"role": "user", "content": prompt},
            ],
            max_completion_tokens=options.max_tokens,
        )
        if not response.choices:
            return ""
        return response.choices[0].message.content or ""


def get_completion_client():
    client_class = import_string(settings.AI_CLIENT_CLASS)
    return client_class()


def get_chat_response(message: str, language: str = 'en', client=None) -> str:
    options = CompletionOptions(system_prompt=chat_system_prompt(language), max_tokens=CHAT_MAX_TOKENS)
    try:
        client = client or get_completion_client()
        text = client.complete(message, options)
    except Exception as e:
        logger.error(f"AI chat completion error: {str(e)}")
        raise AIGatewayError(CHAT_FAILURE) from e
    return text or CHAT_FALLBACK


def analyze_soil(data: dict, client=None) -> str:
    """
    Ask the provider for fertilizer recommendations for a soil profile.

    ``data`` holds soil_type, nitrogen, phosphorus, potassium, ph and
    organic_matter; missing readings fall back to 0 (pH to neutral 7).
    """
    prompt = soil_analysis_prompt(
        soil_type=data['soil_type'],
        nitrogen=data.get('nitrogen') or 0,
        phosphorus=data.get('phosphorus') or 0,
        potassium=data.get('potassium') or 0,
        ph=data.get('ph') or 7,
        organic_matter=data.get('organic_matter') or 0,
    )
    options = CompletionOptions(system_prompt=SOIL_SYSTEM_PROMPT, max_tokens=SOIL_MAX_TOKENS)
    try:
        client = client or get_completion_client()
        text = client.complete(prompt, options)
    except Exception as e:
        logger.error(f"AI soil analysis error: {str(e)}")
        raise AIGatewayError(SOIL_FAILURE) from e
    return text or SOIL_FALLBACK
