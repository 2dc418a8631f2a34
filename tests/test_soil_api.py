import pytest

from soilApp.models import SoilAnalysis

pytestmark = pytest.mark.django_db

SAMPLE = {
    'soilType': 'loamy',
    'nitrogen': 45,
    'phosphorus': 30,
    'potassium': 60,
    'ph': 6.8,
    'organicMatter': 3.5,
}


def test_analyze_stores_recommendations(api_client, farmer, fake_ai):
    response = api_client.post('/api/soil/analyze', SAMPLE, format='json')

    assert response.status_code == 200
    body = response.json()
    assert body['soilType'] == 'loamy'
    assert body['organicMatter'] == 3.5
    assert body['recommendations'] == fake_ai.reply
    assert body['farmerId'] == farmer.id

    analysis = SoilAnalysis.objects.get()
    assert analysis.ph == 6.8
    assert analysis.recommendations == fake_ai.reply

    prompt, _ = fake_ai.calls[0]
    assert "Soil Type: loamy" in prompt


def test_analyze_requires_soil_type(api_client, farmer, fake_ai):
    body = dict(SAMPLE)
    del body['soilType']

    response = api_client.post('/api/soil/analyze', body, format='json')

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid data", "message": "Soil type is required"}
    assert fake_ai.calls == []


@pytest.mark.parametrize("field, value", [
    ('nitrogen', 101),
    ('phosphorus', -1),
    ('ph', 14.5),
    ('organicMatter', 150),
])
def test_analyze_rejects_out_of_range_values(api_client, farmer, fake_ai, field, value):
    response = api_client.post('/api/soil/analyze', {**SAMPLE, field: value}, format='json')

    assert response.status_code == 400
    assert response.json()['message'].startswith(field)
    assert SoilAnalysis.objects.count() == 0


def test_analyze_ai_failure_stores_nothing(api_client, farmer, failing_ai):
    response = api_client.post('/api/soil/analyze', SAMPLE, format='json')

    assert response.status_code == 500
    assert response.json()['message'] == "Failed to analyze soil"
    assert SoilAnalysis.objects.count() == 0
