import threading

import pytest
from django.db import connection

from advisoryApp.models import Advisory
from chatApp.models import ChatMessage
from chatApp.services import HISTORY_LIMIT, send_chat_message
from farmerApp.models import Farmer

pytestmark = pytest.mark.django_db


def test_chat_happy_path(api_client, farmer, fake_ai):
    response = api_client.post('/api/chat/message', {'content': "test"}, format='json')

    assert response.status_code == 200
    body = response.json()
    assert body['userMessage']['role'] == 'user'
    assert body['userMessage']['content'] == "test"
    assert body['assistantMessage']['role'] == 'assistant'
    assert body['assistantMessage']['content'] == fake_ai.reply
    assert body['assistantMessage']['farmerId'] == farmer.id

    history = api_client.get('/api/chat/messages').json()
    assert [m['role'] for m in history] == ['user', 'assistant']
    assert [m['content'] for m in history] == ["test", fake_ai.reply]


def test_chat_passes_language_to_assistant(api_client, farmer, fake_ai):
    response = api_client.post('/api/chat/message', {'content': "गेहूं", 'language': 'hi'}, format='json')

    assert response.status_code == 200
    assert response.json()['userMessage']['language'] == 'hi'
    _, options = fake_ai.calls[0]
    assert "हिंदी" in options.system_prompt


@pytest.mark.parametrize("body", [{}, {"content": ""}, {"content": "   "}, {"content": None}, ["test"], "test"])
def test_chat_requires_content(api_client, farmer, fake_ai, body):
    response = api_client.post('/api/chat/message', body, format='json')

    assert response.status_code == 400
    assert response.json()['message'] == "Message content is required"
    assert ChatMessage.objects.count() == 0
    assert fake_ai.calls == []


def test_chat_ai_failure_rolls_back_user_message(api_client, farmer, failing_ai):
    response = api_client.post('/api/chat/message', {'content': "test"}, format='json')

    assert response.status_code == 500
    assert response.json() == {"error": "Upstream failure", "message": "Failed to process chat message"}
    assert ChatMessage.objects.count() == 0


def test_history_is_latest_messages_oldest_first(api_client, farmer, fake_ai):
    for i in range(HISTORY_LIMIT + 5):
        ChatMessage.objects.create(farmer=farmer, role=ChatMessage.ROLE_USER, content=f"message {i}")

    history = api_client.get('/api/chat/messages').json()

    assert len(history) == HISTORY_LIMIT
    assert history[0]['content'] == "message 5"
    assert history[-1]['content'] == f"message {HISTORY_LIMIT + 4}"


def test_history_is_scoped_to_current_farmer(api_client, farmer, fake_ai, settings):
    settings.TRUST_FARMER_HEADER = True
    other = Farmer.objects.create(name="Other", location="Bihar")
    ChatMessage.objects.create(farmer=other, role=ChatMessage.ROLE_USER, content="not mine")
    ChatMessage.objects.create(farmer=farmer, role=ChatMessage.ROLE_USER, content="mine")

    history = api_client.get('/api/chat/messages').json()
    assert [m['content'] for m in history] == ["mine"]

    history = api_client.get('/api/chat/messages', HTTP_X_FARMER_ID=other.id).json()
    assert [m['content'] for m in history] == ["not mine"]


def test_send_chat_message_rejects_blank_content(farmer, fake_ai):
    with pytest.raises(ValueError):
        send_chat_message(farmer, "  ")


def test_send_chat_message_normalizes_unknown_language(farmer, fake_ai):
    user_message, assistant_message = send_chat_message(farmer, "hello", language='fr')
    assert user_message.language == 'en'
    assert assistant_message.language == 'en'


class InspectingClient:
    """Records whether a transaction or a stored message exists while the AI answers."""

    def __init__(self):
        self.seen = []

    def complete(self, prompt, options):
        self.seen.append((connection.in_atomic_block, ChatMessage.objects.count()))
        return "answer"


@pytest.mark.django_db(transaction=True)
def test_ai_call_runs_outside_any_transaction():
    farmer = Farmer.objects.create(name="Asha", location="Bihar")
    client = InspectingClient()

    send_chat_message(farmer, "hello", client=client)

    assert client.seen == [(False, 0)]
    assert list(ChatMessage.objects.values_list('role', flat=True)) == ['user', 'assistant']


class SlowClient:
    def __init__(self):
        self.started = threading.Event()
        self.release = threading.Event()

    def complete(self, prompt, options):
        self.started.set()
        self.release.wait(10)
        return "answer"


@pytest.mark.django_db(transaction=True)
def test_other_writes_proceed_while_waiting_on_ai():
    farmer = Farmer.objects.create(name="Asha", location="Bihar")
    client = SlowClient()
    errors = []

    def chat():
        try:
            send_chat_message(farmer, "hello", client=client)
        except Exception as e:
            errors.append(e)
        finally:
            connection.close()

    worker = threading.Thread(target=chat)
    worker.start()
    try:
        assert client.started.wait(10)
        Advisory.objects.create(title="Frost warning", content="Cover seedlings", category="weather")
    finally:
        client.release.set()
        worker.join(10)

    assert errors == []
    assert Advisory.objects.count() == 1
    assert ChatMessage.objects.filter(farmer=farmer).count() == 2
