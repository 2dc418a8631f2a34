import pytest
from django.core.management import call_command

from advisoryApp.models import Advisory
from cropApp.models import Crop
from farmerApp.models import Farmer
from pestApp.models import PestDisease
from resourceApp.models import Resource
from resourceApp.views import current_resources
from weatherApp.models import WeatherData

pytestmark = pytest.mark.django_db


def test_seed_demo_populates_every_table(settings):
    call_command('seed_demo')

    farmer = Farmer.objects.get(id=settings.DEFAULT_FARMER_ID)
    assert Crop.objects.count() == 6
    assert WeatherData.objects.get().condition == "Partly Cloudy"
    assert len(WeatherData.objects.get().forecast) == 5
    assert current_resources(farmer).count() == 3
    assert Advisory.objects.count() == 3
    assert Advisory.objects.filter(severity='critical').count() == 1
    assert PestDisease.objects.count() == 6


def test_seed_demo_flush_replaces_data():
    call_command('seed_demo')
    call_command('seed_demo', flush=True)

    assert Farmer.objects.count() == 1
    assert Crop.objects.count() == 6
    assert Resource.objects.count() == 3
    assert PestDisease.objects.count() == 6


def test_seed_demo_twice_without_flush_does_not_duplicate():
    call_command('seed_demo')
    call_command('seed_demo')

    assert Crop.objects.count() == 6
    assert WeatherData.objects.count() == 1
    assert Resource.objects.count() == 3
    assert Advisory.objects.count() == 3
    assert PestDisease.objects.count() == 6
