from unittest import mock

import pytest

from assistantApp.gateway import (
    CHAT_FALLBACK, CHAT_MAX_TOKENS, SOIL_FALLBACK, SOIL_MAX_TOKENS, AIGatewayError, CompletionOptions,
    OpenAICompletionClient, analyze_soil, get_chat_response, get_completion_client,
)
from assistantApp.prompts import CHAT_SYSTEM_PROMPTS, SOIL_SYSTEM_PROMPT
from tests.fakes import EmptyCompletionClient, FailingCompletionClient, FakeCompletionClient


class RecordingClient:
    def __init__(self, reply="ok"):
        self.reply = reply
        self.calls = []

    def complete(self, prompt, options):
        self.calls.append((prompt, options))
        return self.reply


def test_chat_uses_localized_system_prompt_and_budget():
    client = RecordingClient("Sow wheat in November.")

    answer = get_chat_response("When should I sow wheat?", 'hi', client=client)

    assert answer == "Sow wheat in November."
    prompt, options = client.calls[0]
    assert prompt == "When should I sow wheat?"
    assert options.system_prompt == CHAT_SYSTEM_PROMPTS['hi']
    assert options.max_tokens == CHAT_MAX_TOKENS == 500


def test_chat_unknown_language_uses_english_prompt():
    client = RecordingClient()
    get_chat_response("hello", 'fr', client=client)
    assert client.calls[0][1].system_prompt == CHAT_SYSTEM_PROMPTS['en']


def test_chat_empty_answer_falls_back():
    assert get_chat_response("hello", client=EmptyCompletionClient()) == CHAT_FALLBACK


def test_chat_failure_is_wrapped_with_generic_message():
    with pytest.raises(AIGatewayError) as excinfo:
        get_chat_response("hello", client=FailingCompletionClient())
    assert str(excinfo.value) == "Failed to get AI response"
    assert "sk-secret" not in str(excinfo.value)


def test_soil_prompt_lists_all_readings():
    client = RecordingClient("Apply DAP")
    data = {
        'soil_type': 'clay', 'nitrogen': 20, 'phosphorus': 40, 'potassium': 60,
        'ph': 6.1, 'organic_matter': 2.5,
    }

    assert analyze_soil(data, client=client) == "Apply DAP"

    prompt, options = client.calls[0]
    assert "Soil Type: clay" in prompt
    assert "Nitrogen (N): 20%" in prompt
    assert "Phosphorus (P): 40%" in prompt
    assert "Potassium (K): 60%" in prompt
    assert "pH Level: 6.1" in prompt
    assert "Organic Matter: 2.5%" in prompt
    assert "5. Organic amendments to improve soil quality" in prompt
    assert options.system_prompt == SOIL_SYSTEM_PROMPT
    assert options.max_tokens == SOIL_MAX_TOKENS == 800


def test_soil_missing_readings_use_defaults():
    client = RecordingClient()
    analyze_soil({'soil_type': 'sandy'}, client=client)
    prompt = client.calls[0][0]
    assert "Nitrogen (N): 0%" in prompt
    assert "pH Level: 7" in prompt


def test_soil_empty_answer_falls_back():
    assert analyze_soil({'soil_type': 'sandy'}, client=EmptyCompletionClient()) == SOIL_FALLBACK


def test_soil_failure_is_wrapped():
    with pytest.raises(AIGatewayError, match="Failed to analyze soil"):
        analyze_soil({'soil_type': 'sandy'}, client=FailingCompletionClient())


def test_completion_client_comes_from_settings(settings):
    settings.AI_CLIENT_CLASS = 'tests.fakes.FakeCompletionClient'
    assert isinstance(get_completion_client(), FakeCompletionClient)


def test_openai_client_sends_system_and_user_messages(settings):
    settings.OPENAI_API_KEY = 'test-key'
    settings.AI_MODEL = 'gpt-5'
    choice = mock.Mock()
    choice.message.content = "Irrigate at dawn."
    with mock.patch('openai.OpenAI') as openai_class:
        openai_class.return_value.chat.completions.create.return_value = mock.Mock(choices=[choice])
        client = OpenAICompletionClient()
        answer = client.complete("How to irrigate?", CompletionOptions(system_prompt="sys", max_tokens=500))

    assert answer == "Irrigate at dawn."
    openai_class.assert_called_once_with(api_key='test-key')
    openai_class.return_value.chat.completions.create.assert_called_once_with(
        model='gpt-5',
        messages=[
            {"role": "system", "content": "sys"},
            {"role": "user", "content": "How to irrigate?"},
        ],
        max_completion_tokens=500,
    )


def test_openai_client_without_choices_returns_empty_text(settings):
    with mock.patch('openai.OpenAI') as openai_class:
        openai_class.return_value.chat.completions.create.return_value = mock.Mock(choices=[])
        client = OpenAICompletionClient(api_key='k', model='m')
        assert client.complete("hi", CompletionOptions(system_prompt="s", max_tokens=10)) == ""
