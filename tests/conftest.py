import pytest
from rest_framework.test import APIClient

from farmerApp.models import Farmer
from tests.fakes import FakeCompletionClient


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def farmer(db, settings):
    return Farmer.objects.create(
        id=settings.DEFAULT_FARMER_ID,
        name="Demo Farmer",
        location="Punjab, India",
        language="en",
    )


@pytest.fixture
def fake_ai(settings):
    FakeCompletionClient.calls = []
    settings.AI_CLIENT_CLASS = 'tests.fakes.FakeCompletionClient'
    return FakeCompletionClient


@pytest.fixture
def failing_ai(settings):
    settings.AI_CLIENT_CLASS = 'tests.fakes.FailingCompletionClient'


@pytest.fixture
def empty_ai(settings):
    settings.AI_CLIENT_CLASS = 'tests.fakes.EmptyCompletionClient'
