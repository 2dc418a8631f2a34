"""
Resource efficiency classification.

Usage is expressed as a percentage of the optimal quantity, capped at 100
for display, and banded as:

    percentage <= 90          -> "efficient"
    90 < percentage <= 110    -> "warning"
    percentage > 110          -> "critical"
"""
from collections import namedtuple

EFFICIENT = 'efficient'
WARNING = 'warning'
CRITICAL = 'critical'

EFFICIENT_LIMIT = 90.0
WARNING_LIMIT = 110.0

Efficiency = namedtuple('Efficiency', ['percentage', 'status'])


def usage_ratio(used, optimal):
    """Uncapped usage as a percentage of optimal; 0 when optimal is 0."""
    if not optimal:
        return 0.0
    return float(used) / float(optimal) * 100


def efficiency_percentage(used, optimal):
    return min(100.0, usage_ratio(used, optimal))


def efficiency_status(percentage):
    if percentage <= EFFICIENT_LIMIT:
        return EFFICIENT
    if percentage <= WARNING_LIMIT:
        return WARNING
    return CRITICAL


def classify_usage(used, optimal):
    # The band uses the uncapped ratio, otherwise overuse could never be critical
    return Efficiency(
        percentage=efficiency_percentage(used, optimal),
        status=efficiency_status(usage_ratio(used, optimal)),
    )
