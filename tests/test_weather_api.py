import pytest

from weatherApp.models import WeatherData

pytestmark = pytest.mark.django_db


def test_current_weather_empty_table_is_404(api_client):
    response = api_client.get('/api/weather/current')

    assert response.status_code == 404
    assert response.json()['message'] == "No weather data available"


def test_current_weather_returns_latest_snapshot(api_client):
    WeatherData.objects.create(location="Punjab, India", temperature=25, condition="Sunny")
    WeatherData.objects.create(
        location="Punjab, India",
        temperature=28,
        humidity=65,
        wind_speed=12,
        condition="Partly Cloudy",
        forecast=[{'day': "Tomorrow", 'temp': 29, 'condition': "Sunny"}],
    )

    response = api_client.get('/api/weather/current')

    assert response.status_code == 200
    body = response.json()
    assert body['temperature'] == 28
    assert body['windSpeed'] == 12
    assert body['forecast'] == [{'day': "Tomorrow", 'temp': 29, 'condition': "Sunny"}]
