from datetime import datetime, timedelta

import pytest
from django.utils import timezone

from advisoryApp.models import Advisory
from cropApp.models import Crop
from pestApp.models import PestDisease
from resourceApp.models import Resource
from resourceApp.views import current_period

pytestmark = pytest.mark.django_db


def make_crop(name, **extra):
    return Crop.objects.create(
        name=name, season="Rabi (Winter)", soil_type="loamy", water_requirement="Medium", **extra
    )


def test_recommended_crops_are_limited_to_four(api_client):
    for name in ("Wheat", "Rice", "Cotton", "Sugarcane", "Maize", "Mustard"):
        make_crop(name)

    recommended = api_client.get('/api/crops/recommended').json()
    everything = api_client.get('/api/crops').json()

    assert [c['name'] for c in recommended] == ["Wheat", "Rice", "Cotton", "Sugarcane"]
    assert len(everything) == 6


def test_crop_fields_are_camel_case(api_client):
    make_crop("Wheat", expected_yield=2500, profit_estimate=45000, growth_duration=120)

    crop = api_client.get('/api/crops').json()[0]

    assert crop['soilType'] == "loamy"
    assert crop['waterRequirement'] == "Medium"
    assert crop['expectedYield'] == 2500
    assert crop['profitEstimate'] == 45000
    assert crop['growthDuration'] == 120


def test_advisories_newest_first(api_client):
    now = timezone.now()
    for days_ago in (5, 1, 3, 2):
        Advisory.objects.create(
            title=f"{days_ago} days ago",
            content="...",
            category="weather",
            timestamp=now - timedelta(days=days_ago),
        )

    recent = api_client.get('/api/advisories/recent').json()
    everything = api_client.get('/api/advisories').json()

    assert [a['title'] for a in recent] == ["1 days ago", "2 days ago", "3 days ago"]
    assert len(everything) == 4
    assert everything[-1]['title'] == "5 days ago"
    assert everything[0]['severity'] == 'info'


def test_pests_search_matches_name_or_crop(api_client):
    PestDisease.objects.create(
        name="Stem Borer", type='pest', crop_affected="Rice", severity='high',
        symptoms=["Dead hearts"], treatment="Cartap",
    )
    PestDisease.objects.create(
        name="Leaf Rust", type='disease', crop_affected="Wheat", severity='medium',
        symptoms=["Pustules"], treatment="Propiconazole",
    )

    assert len(api_client.get('/api/pests-diseases').json()) == 2

    by_crop = api_client.get('/api/pests-diseases', {'search': 'wheat'}).json()
    assert [p['name'] for p in by_crop] == ["Leaf Rust"]
    assert by_crop[0]['cropAffected'] == "Wheat"
    assert by_crop[0]['symptoms'] == ["Pustules"]

    by_name = api_client.get('/api/pests-diseases', {'search': 'BORER'}).json()
    assert [p['name'] for p in by_name] == ["Stem Borer"]


def test_current_resources_for_farmer_and_month(api_client, farmer):
    month, year = current_period()
    Resource.objects.create(farmer=farmer, resource_type='water', used=850, optimal=1000,
                            unit='liters', month=month, year=year)
    Resource.objects.create(farmer=farmer, resource_type='fertilizer', used=60, optimal=50,
                            unit='kg', month=month, year=year)
    Resource.objects.create(farmer=farmer, resource_type='water', used=1, optimal=1,
                            unit='liters', month=month, year=year - 1)
    Resource.objects.create(resource_type='pesticide', used=1, optimal=5,
                            unit='liters', month=month, year=year)

    rows = api_client.get('/api/resources/current').json()

    assert [r['resourceType'] for r in rows] == ['water', 'fertilizer']
    assert rows[0]['efficiency'] == {'percentage': 85.0, 'status': 'efficient'}
    assert rows[1]['efficiency'] == {'percentage': 100.0, 'status': 'critical'}
    assert rows[0]['farmerId'] == farmer.id


def test_current_period_uses_english_month_name():
    moment = timezone.make_aware(datetime(2024, 3, 15, 12, 0))
    assert current_period(moment) == ("March", 2024)
