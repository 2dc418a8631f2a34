import pytest

from resourceApp.efficiency import (
    CRITICAL, EFFICIENT, WARNING, classify_usage, efficiency_percentage, efficiency_status,
)
from resourceApp.models import Resource


@pytest.mark.parametrize("percentage, expected", [
    (0, EFFICIENT),
    (90, EFFICIENT),
    (90.01, WARNING),
    (110, WARNING),
    (110.01, CRITICAL),
    (250, CRITICAL),
])
def test_efficiency_status_bands(percentage, expected):
    assert efficiency_status(percentage) == expected


def test_percentage_is_capped_at_100():
    assert efficiency_percentage(850, 1000) == pytest.approx(85.0)
    assert efficiency_percentage(1500, 1000) == 100.0


def test_zero_optimal_gives_zero_percentage():
    assert efficiency_percentage(40, 0) == 0.0
    assert classify_usage(40, 0).status == EFFICIENT


def test_overuse_is_critical_even_though_percentage_is_capped():
    result = classify_usage(60, 50)
    assert result.percentage == 100.0
    assert result.status == CRITICAL


def test_resource_exposes_efficiency():
    resource = Resource(resource_type='fertilizer', used=45, optimal=50, unit='kg', month='June', year=2024)
    assert resource.efficiency.percentage == pytest.approx(90.0)
    assert resource.efficiency.status == EFFICIENT
