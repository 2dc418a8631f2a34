"""Qualitative display bands for soil readings."""

LOW = 'low'
MEDIUM = 'medium'
HIGH = 'high'

TOO_ACIDIC = 'Too Acidic'
SLIGHTLY_ACIDIC = 'Slightly Acidic'
OPTIMAL = 'Optimal'
SLIGHTLY_ALKALINE = 'Slightly Alkaline'
TOO_ALKALINE = 'Too Alkaline'

# Bands shown next to each reading: "good", "fair" or "poor"
TONE_BY_LEVEL = {
    LOW: 'poor',
    MEDIUM: 'fair',
    HIGH: 'good',
    TOO_ACIDIC: 'poor',
    SLIGHTLY_ACIDIC: 'fair',
    OPTIMAL: 'good',
    SLIGHTLY_ALKALINE: 'fair',
    TOO_ALKALINE: 'poor',
}


def nutrient_status(value):
    """Band a nitrogen/phosphorus/potassium level on the 0-100 scale."""
    if value < 30:
        return LOW
    if value < 70:
        return MEDIUM
    return HIGH


def ph_status(ph):
    if ph < 5.5:
        return TOO_ACIDIC
    if ph < 6.5:
        return SLIGHTLY_ACIDIC
    if ph <= 7.5:
        return OPTIMAL
    if ph <= 8.5:
        return SLIGHTLY_ALKALINE
    return TOO_ALKALINE


def tone(level):
    return TONE_BY_LEVEL.get(level, 'fair')
