import logging

from django.db import transaction

from assistantApp.gateway import get_chat_response
from .models import ChatMessage

logger = logging.getLogger(__name__)

HISTORY_LIMIT = 50
SUPPORTED_LANGUAGES = ('en', 'hi')


def normalize_language(language):
    language = (language or 'en').strip().lower()
    return language if language in SUPPORTED_LANGUAGES else 'en'


def chat_history(farmer):
    """The farmer's latest HISTORY_LIMIT messages, oldest first."""
    latest = ChatMessage.objects.filter(farmer=farmer).order_by('-timestamp', '-id')[:HISTORY_LIMIT]
    return list(reversed(latest))


def send_chat_message(farmer, content, language='en', client=None):
    """
    Ask the AI assistant, then store the farmer's message and its answer.

    The AI call runs before any database write so no transaction is held
    open while waiting on the provider. When it raises ``AIGatewayError``
    nothing is stored, so the transcript never holds an unanswered question.
    """
    content = (content or '').strip()
    if not content:
        raise ValueError("Message content is required")
    language = normalize_language(language)

    answer = get_chat_response(content, language, client=client)

    with transaction.atomic():
        user_message = ChatMessage.objects.create(
            farmer=farmer,
            role=ChatMessage.ROLE_USER,
            content=content,
            language=language,
        )
        assistant_message = ChatMessage.objects.create(
            farmer=farmer,
            role=ChatMessage.ROLE_ASSISTANT,
            content=answer,
            language=language,
        )

    logger.info(f"Chat exchange stored for farmer {farmer.id}: messages {user_message.id}, {assistant_message.id}")
    return user_message, assistant_message
