import pytest

from soilApp.levels import nutrient_status, ph_status, tone


@pytest.mark.parametrize("value, expected", [
    (0, 'low'),
    (29.9, 'low'),
    (30, 'medium'),
    (69, 'medium'),
    (70, 'high'),
    (100, 'high'),
])
def test_nutrient_status(value, expected):
    assert nutrient_status(value) == expected


@pytest.mark.parametrize("ph, expected", [
    (5.4, 'Too Acidic'),
    (5.5, 'Slightly Acidic'),
    (6.5, 'Optimal'),
    (7.5, 'Optimal'),
    (8.5, 'Slightly Alkaline'),
    (8.51, 'Too Alkaline'),
])
def test_ph_status(ph, expected):
    assert ph_status(ph) == expected


def test_tone():
    assert tone('high') == 'good'
    assert tone('Too Alkaline') == 'poor'
    assert tone('something else') == 'fair'
